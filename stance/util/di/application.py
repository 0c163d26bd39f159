"""Application layer DI providers."""

from dishka import Scope, provide

from stance.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    ToggleLikeUseCase,
)
from stance.application.usecase.content import (
    DeleteContentUseCase,
    GetAdminContentUseCase,
    GetContentUseCase,
    ListAdminContentsUseCase,
    ListContentsUseCase,
    SaveContentUseCase,
)
from stance.application.usecase.moderation import (
    DeleteDiscussionItemUseCase,
    ListDiscussionItemsUseCase,
    UpdateDiscussionStatusUseCase,
)
from stance.application.usecase.vote import CastVoteUseCase, CheckVoteUseCase
from stance.domain.service import (
    CommentService,
    ContentService,
    LikeService,
    ModerationService,
    VoteService,
)
from stance.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_check_vote_use_case(self, vote_service: VoteService) -> CheckVoteUseCase:
        return CheckVoteUseCase(vote_service=vote_service)

    # Discussion use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_create_reply_use_case(
        self, comment_service: CommentService
    ) -> CreateReplyUseCase:
        return CreateReplyUseCase(comment_service=comment_service)

    @provide
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        return ToggleLikeUseCase(like_service=like_service)

    # Content use cases
    @provide
    def get_list_contents_use_case(
        self, content_service: ContentService, vote_service: VoteService
    ) -> ListContentsUseCase:
        return ListContentsUseCase(
            content_service=content_service, vote_service=vote_service
        )

    @provide
    def get_get_content_use_case(
        self,
        content_service: ContentService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> GetContentUseCase:
        return GetContentUseCase(
            content_service=content_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide
    def get_list_admin_contents_use_case(
        self, content_service: ContentService, vote_service: VoteService
    ) -> ListAdminContentsUseCase:
        return ListAdminContentsUseCase(
            content_service=content_service, vote_service=vote_service
        )

    @provide
    def get_get_admin_content_use_case(
        self, content_service: ContentService, vote_service: VoteService
    ) -> GetAdminContentUseCase:
        return GetAdminContentUseCase(
            content_service=content_service, vote_service=vote_service
        )

    @provide
    def get_save_content_use_case(
        self, content_service: ContentService, vote_service: VoteService
    ) -> SaveContentUseCase:
        return SaveContentUseCase(
            content_service=content_service, vote_service=vote_service
        )

    @provide
    def get_delete_content_use_case(
        self, content_service: ContentService
    ) -> DeleteContentUseCase:
        return DeleteContentUseCase(content_service=content_service)

    # Moderation use cases
    @provide
    def get_list_discussion_items_use_case(
        self, moderation_service: ModerationService
    ) -> ListDiscussionItemsUseCase:
        return ListDiscussionItemsUseCase(moderation_service=moderation_service)

    @provide
    def get_update_discussion_status_use_case(
        self, moderation_service: ModerationService
    ) -> UpdateDiscussionStatusUseCase:
        return UpdateDiscussionStatusUseCase(moderation_service=moderation_service)

    @provide
    def get_delete_discussion_item_use_case(
        self, moderation_service: ModerationService
    ) -> DeleteDiscussionItemUseCase:
        return DeleteDiscussionItemUseCase(moderation_service=moderation_service)
