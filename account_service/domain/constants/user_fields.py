"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    PHONE_NUMBER = "phone_number"
    FULL_NAME = "full_name"
    HASHED_PASSWORD = "hashed_password"
    SUCCESSFUL_LOGINS = "successful_logins"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    SEQUENCE = "seq"  # counter value in the counters collection
    USERS_SEQUENCE_NAME = "users"
