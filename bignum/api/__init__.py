"""HTTP API for the bignum calculator."""
