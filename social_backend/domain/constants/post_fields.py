"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    OWNER_ID = "user"
    LIKES = "likes"
    DISLIKES = "dislikes"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    OWNER = "owner"  # Alias for the joined user document when listing
