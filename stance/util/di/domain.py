"""Domain layer DI providers."""

from dishka import Scope, provide

from stance.config import AdminSettings, DiscussionSettings, IdentitySettings
from stance.domain.repository import (
    CommentRepository,
    ContentRepository,
    LikeRepository,
    ReplyRepository,
    TransactionManager,
    VoteRepository,
)
from stance.domain.service import (
    AdminTokenService,
    CommentService,
    ContentService,
    IdentityResolver,
    LikeService,
    ModerationService,
    VoteService,
)
from stance.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_identity_resolver(
        self, identity_settings: IdentitySettings
    ) -> IdentityResolver:
        """Provide the (stateless) identity resolver."""
        return IdentityResolver(identity_settings=identity_settings)

    @provide(scope=Scope.APP)
    def get_admin_token_service(
        self, admin_settings: AdminSettings
    ) -> AdminTokenService:
        """Provide admin token service."""
        return AdminTokenService(admin_settings=admin_settings)

    @provide
    def get_content_service(
        self,
        content_repository: ContentRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        transaction_manager: TransactionManager,
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            content_repository=content_repository,
            vote_repository=vote_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, content_service: ContentService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, content_service=content_service
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        content_service: ContentService,
        vote_service: VoteService,
        discussion_settings: DiscussionSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
            content_service=content_service,
            vote_service=vote_service,
            discussion_settings=discussion_settings,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        comment_service: CommentService,
        vote_service: VoteService,
        discussion_settings: DiscussionSettings,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            comment_service=comment_service,
            vote_service=vote_service,
            discussion_settings=discussion_settings,
        )

    @provide
    def get_moderation_service(
        self,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        transaction_manager: TransactionManager,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            content_repository=content_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
            transaction_manager=transaction_manager,
        )
