# Standard library imports
import logging

# Local application imports
from ..models.identity import Identity
from ..models.post import Post
from ..exceptions import ForbiddenError

logger = logging.getLogger(__name__)


class OwnershipGuard:
    """Restricts mutation of a post to the identity that created it"""

    def authorize(self, identity: Identity, post: Post) -> None:
        """
        Allow the mutation only when the caller owns the post

        Args:
            identity: Verified caller identity
            post: Post about to be mutated

        Raises:
            ForbiddenError: If identity.user_id differs from post.owner_id
        """
        if identity.user_id != post.owner_id:
            logger.warning(
                "User %s attempted to modify post %s owned by %s",
                identity.user_id, post.id, post.owner_id,
            )
            raise ForbiddenError("Unauthorized action")
