"""Constants for Picture model field names"""


class PictureFields:
    """Field name constants for the pictures table"""
    ID = "id"
    USER_ID = "user_id"
    IMAGE_URL = "image_url"
    PICTURE_NAME = "picture_name"
    DESCRIPTION = "description"
    DELETED = "deleted"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
