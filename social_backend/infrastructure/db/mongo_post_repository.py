# Standard library imports
import logging
from typing import Optional, List, Dict, Any, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields, UserFields
from ...domain.exceptions import RepositoryError
from .mongo_connection import get_post_collection

logger = logging.getLogger(__name__)

# Counters that may be incremented through increment_counter
REACTION_FIELDS = (PostFields.LIKES, PostFields.DISLIKES)


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(
        self,
        post_collection: Optional[AsyncIOMotorCollection] = None,
        user_collection_name: str = "users",
    ) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()
        self.user_collection_name = user_collection_name

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: The post ID to find

        Returns:
            Post domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding post by ID: {str(e)}", operation="find_by_id")

        if document is None:
            return None
        return self._document_to_post(document)

    async def list_with_owners(self) -> List[Post]:
        """
        List all posts joined with their owner's username

        Returns:
            List of Post domain models in natural (insertion) order. Documents that
            cannot form a valid Post (no owner, empty title or content) are skipped.
        """
        pipeline = [
            {
                "$lookup": {
                    "from": self.user_collection_name,
                    "localField": PostFields.OWNER_ID,
                    "foreignField": UserFields.MONGO_ID,
                    "as": PostFields.OWNER,
                }
            },
            {"$unwind": {"path": f"${PostFields.OWNER}", "preserveNullAndEmptyArrays": True}},
            {"$project": {f"{PostFields.OWNER}.{UserFields.PASSWORD_HASH}": 0}},
        ]

        try:
            cursor = self.post_collection.aggregate(pipeline)
            posts = []
            async for document in cursor:
                try:
                    posts.append(self._document_to_post(document))
                except ValueError as e:
                    logger.warning("Skipping malformed post %s: %s", document.get(PostFields.MONGO_ID), e)
            return posts
        except PyMongoError as e:
            raise RepositoryError(f"Error listing posts: {str(e)}", operation="list_with_owners")

    async def save(self, post: Post) -> Optional[Post]:
        """
        Save post (create new or overwrite title/content of an existing one)

        Args:
            post: Post domain model to save

        Returns:
            Saved Post domain model with ID set, or None if the post to update no longer exists
        """
        if not post:
            raise ValueError("Post cannot be None")

        try:
            if post.id:
                object_id = _to_object_id(post.id)
                if object_id is None:
                    return None

                updated_document = await self.post_collection.find_one_and_update(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": {PostFields.TITLE: post.title, PostFields.CONTENT: post.content}},
                    return_document=ReturnDocument.AFTER,
                )
                if updated_document is None:
                    return None
                return self._document_to_post(updated_document)

            post_dict = self._post_to_dict(post)
            result = await self.post_collection.insert_one(post_dict)
            post_dict[PostFields.MONGO_ID] = result.inserted_id
            return self._document_to_post(post_dict)
        except PyMongoError as e:
            raise RepositoryError(f"Error saving post: {str(e)}", operation="save")

    async def delete(self, post_id: str) -> bool:
        """
        Delete post by ID

        Args:
            post_id: The post ID to delete

        Returns:
            True if a document was removed
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting post: {str(e)}", operation="delete")
        return result.deleted_count > 0

    async def increment_counter(self, post_id: str, field: str) -> Optional[Post]:
        """
        Atomically increment a reaction counter with a single $inc update

        Args:
            post_id: The post ID
            field: PostFields.LIKES or PostFields.DISLIKES

        Returns:
            Updated Post domain model, or None if the post does not exist
        """
        if field not in REACTION_FIELDS:
            raise ValueError(f"Unsupported reaction counter: {field}")

        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: object_id},
                {"$inc": {field: 1}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error incrementing {field}: {str(e)}", operation="increment_counter")

        if document is None:
            return None
        return self._document_to_post(document)

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary (optionally with a joined owner)

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        owner = document.get(PostFields.OWNER) or {}
        owner_id = document.get(PostFields.OWNER_ID)

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            owner_id=str(owner_id) if owner_id is not None else "",
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT, ""),
            likes=int(document.get(PostFields.LIKES) or 0),
            dislikes=int(document.get(PostFields.DISLIKES) or 0),
            owner_username=owner.get(UserFields.USERNAME),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document

        Args:
            post: Post domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        owner_ref: Union[ObjectId, str] = _to_object_id(post.owner_id) or post.owner_id

        return {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.OWNER_ID: owner_ref,
            PostFields.LIKES: post.likes,
            PostFields.DISLIKES: post.dislikes,
        }
