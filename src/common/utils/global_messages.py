
class GlobalMessages:
    # Auth Messages
    INVALID_CREDENTIALS = "Invalid credentials provided."
    ACCOUNT_ALREADY_EXISTS = "An account with this username already exists."
    REGISTRATION_SUCCESSFUL = "Registration successful."
    TOKEN_MISSING = "Token not provided."
    TOKEN_INVALID = "Token is invalid or has expired."
    TOKEN_WITHOUT_IDENTITY = "No identity found in the token."

    # Identity Messages
    USER_NOT_FOUND = "User not found."
    NURSE_NOT_FOUND = "Nurse not found."

    # Service request Messages
    SERVICE_REQUEST_NOT_FOUND = "Service request not found."
    SERVICE_REQUEST_USER_REQUIRED = "The user_id field is required."
    SERVICE_REQUEST_INVALID_STATE = "Invalid state."
    SERVICE_REQUEST_COMPLETED = "A completed service request cannot change state."
    SERVICE_REQUEST_NOT_ASSIGNED = "Only the assigned nurse can change the state of this request."
    NO_REQUESTS_FOR_NURSE = "No service requests found for this nurse."
    STATE_UPDATED = "State updated successfully."

    # Guard Messages
    ACCESS_DENIED = "Access denied."
    RECEIVER_NOT_PARTY = "The receiver must be the other party of the service request."
    CANNOT_REVIEW = "A service that has not been completed cannot be reviewed."
    ALREADY_REVIEWED = "This service request has already been reviewed."
    TRANSACTION_NOT_FOUND = "Transaction not found or access denied."
    ALREADY_PAID = "This service request has already been paid."
    PAYMENT_NOT_RELEASABLE = "Payment can only be released for a paid, completed service request."

    # Patient Messages
    PATIENT_USER_REQUIRED = "The user_id field is required."
    PATIENT_NOT_FOUND = "Patient not found."
