"""
Konstanta yang digunakan di seluruh aplikasi UserAuth API.
"""


# Response Messages
class ResponseMessage:
    """Pesan response standar."""
    # Success messages
    REGISTER_SUCCESS = "User registered successfully"

    # Error messages
    USER_ALREADY_EXISTS = "User already exists"
    INVALID_CREDENTIALS = "Invalid credentials"
    NOT_AUTHENTICATED = "Not authenticated"
    TOKEN_INVALID = "Invalid or expired token"
    USER_NOT_FOUND = "User not found"
    INTERNAL_ERROR = "Something went wrong!"
    REGISTER_FAILED = "Error registering user"
    LOGIN_FAILED = "Error logging in"
    PROFILE_FAILED = "Error fetching profile"
