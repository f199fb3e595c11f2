"""A delightful git wrapper with personality."""
