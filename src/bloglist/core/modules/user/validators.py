from bloglist.errors import MissingCredentialsError, PasswordTooLongError, PasswordTooShortError, UsernameTooShortError

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_PASSWORD_BYTES = 72  # bcrypt input limit


def password_fits_hash(password: str) -> bool:
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def validate_registration(username: str | None, password: str | None) -> tuple[str, str]:
    """Validate registration input, reporting only the first violated rule.

    Checks presence, then username length, then password length. Username
    uniqueness depends on store state and is checked by UserService.create_user.

    Returns:
        The username and password, narrowed to str

    Raises:
        MissingCredentialsError: If username or password is absent
        UsernameTooShortError: If username is shorter than 3 characters
        PasswordTooShortError: If password is shorter than 3 characters
        PasswordTooLongError: If password encodes to more than 72 bytes
    """
    if not username or not password:
        raise MissingCredentialsError

    if len(username) < MIN_USERNAME_LENGTH:
        raise UsernameTooShortError

    if len(password) < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError

    if not password_fits_hash(password):
        raise PasswordTooLongError

    return username, password
