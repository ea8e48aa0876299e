"""Constants for Object model field names"""


class ObjectFields:
    """Field name constants for the objects table"""
    ID = "id"
    PICTURE_ID = "picture_id"
    OBJECT_NAME = "object_name"
    X_POSITION = "x_position"
    Y_POSITION = "y_position"
    HAS_AI_COORDINATES = "has_ai_coordinates"
    DELETED = "deleted"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
