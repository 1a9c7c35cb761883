"""Human-readable messages used in response envelopes."""


class Message:
    MISSING_FIELDS = "missing fields"
    INVALID_FIELDS = "invalid field values"
    NO_UNIQUE_ID = "no unique id"
    NO_UPDATE_FIELDS = "no update fields"
    NO_RECORDS = "No records found"
    INTERNAL_SERVER_ERROR = "Internal server error"
    MALFORMED_REQUEST = "malformed request"

    UNAUTHORIZED = "Unauthorized access."
    AUTHENTICATED = "User authenticated"
    NOT_AUTHENTICATED = "User not authenticated"

    ADD_USER_SUCCESS = "User added successfully"
    ADD_USER_ERROR = "Error adding user"
    GET_ALL_USERS = "All users data fetched successfully"
    SINGLE_USER = "Single user data fetched successfully"
    DELETE_USER = "User deleted successfully"
    USER_UPDATE = "User updated successfully"

    ADD_INSTITUTE_SUCCESS = "Institute added successfully"
    ADD_INSTITUTE_ERROR = "Error adding institute"
    GET_ALL_INSTITUTES = "Institute data fetched successfully"
    SINGLE_INSTITUTE = "Single institute data fetched successfully"
    DELETE_INSTITUTE = "Institute deleted successfully"
    INSTITUTE_UPDATE = "Institute updated successfully"
