"""finlink - read API for a user's linked bank accounts and transactions."""
