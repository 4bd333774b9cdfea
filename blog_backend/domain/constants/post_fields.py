"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    IMAGE_URL = "imageUrl"
    CREATOR = "creator"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # MongoDB specific
    MONGO_ID = "_id"


# Reserved imageUrl value meaning "keep the current image"
UNCHANGED_IMAGE_SENTINEL = "undefined"

POSTS_PER_PAGE = 2
