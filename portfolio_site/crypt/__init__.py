"""
The `crypt` package provides the password utilities behind admin login.

Contents
--------
- encrypt_decrypt
    Utility module exposing the `EncryptionDec` class:
        * `hash_password` — hashes a plaintext password with bcrypt
        * `check_passwords` — verifies a plaintext password against a hash
        * `is_hashed` — tells a stored bcrypt hash from a plaintext value
"""
