import bcrypt

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class EncryptionDec:
    """
    Password hashing helpers for the admin back-office.

    `ADMIN_PASSWORD` may be configured either as plaintext (hashed once at
    startup) or as a bcrypt hash; the login check only ever compares against
    the hash.

    Methods
    -------
    hash_password(text: str) -> str
        Hashes a plaintext password using bcrypt with a generated salt.
    check_passwords(plain_text: str, passwd: str) -> bool
        Verifies a plaintext password against a hashed password.
    is_hashed(value: str) -> bool
        True if `value` already looks like a bcrypt hash.
    admin_hash(configured: str) -> str
        The bcrypt hash to check admin logins against.
    """

    def hash_password(self, text: str) -> str:
        """
        Hash a plaintext password using bcrypt.

        Parameters
        ----------
        text : str
            The plaintext password.

        Returns
        -------
        str
            The bcrypt-hashed password (UTF-8 decoded).
        """
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(text.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def check_passwords(self, plain_text: str, passwd: str) -> bool:
        """
        Verify if a plaintext password matches a hashed password.

        Returns
        -------
        bool
            True if the password matches, False otherwise (including a
            malformed hash).
        """
        try:
            return bcrypt.checkpw(plain_text.encode("utf-8"), passwd.encode("utf-8"))
        except ValueError:
            return False

    def is_hashed(self, value: str) -> bool:
        return value.startswith(BCRYPT_PREFIXES) and len(value) == 60

    def admin_hash(self, configured: str) -> str:
        return configured if self.is_hashed(configured) else self.hash_password(configured)
