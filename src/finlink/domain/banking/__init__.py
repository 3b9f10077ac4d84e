"""Banking domain package.

Read model of a user's bank connections, the accounts under them and the
transactions posted to those accounts.
"""
