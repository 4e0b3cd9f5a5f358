"""Application layer DI providers."""

from dishka import Scope, provide

from worldnews.application.usecase.admin import (
    DeleteUserUseCase,
    ListAllPostsUseCase,
    ListUsersUseCase,
    SetUserActiveUseCase,
)
from worldnews.application.usecase.auth import (
    GuestLoginUseCase,
    LoginUseCase,
    RegisterUseCase,
    ResolveSessionUseCase,
)
from worldnews.application.usecase.feed import CompareCountriesUseCase, GetFeedUseCase
from worldnews.application.usecase.like import ToggleLikeUseCase
from worldnews.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListUserPostsUseCase,
    SetPostActiveUseCase,
    SharePostUseCase,
    UpdatePostUseCase,
)
from worldnews.application.usecase.reference import (
    ListCategoriesUseCase,
    ListCountriesUseCase,
)
from worldnews.application.usecase.theme import GetThemeUseCase, UpdateThemeUseCase
from worldnews.application.usecase.user import GetUserUseCase
from worldnews.config import FeedSettings
from worldnews.domain.service import (
    AuthService,
    FeedService,
    JWTService,
    LikeService,
    PostService,
    ShareService,
    ThemeService,
    UserService,
)
from worldnews.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_guest_login_use_case(self, jwt_service: JWTService) -> GuestLoginUseCase:
        """Provide guest login use case."""
        return GuestLoginUseCase(jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_resolve_session_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> ResolveSessionUseCase:
        """Provide resolve session use case."""
        return ResolveSessionUseCase(jwt_service=jwt_service, user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_set_post_active_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> SetPostActiveUseCase:
        """Provide set post active use case."""
        return SetPostActiveUseCase(
            post_service=post_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListUserPostsUseCase:
        """Provide list user posts use case."""
        return ListUserPostsUseCase(
            post_service=post_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_share_post_use_case(
        self, post_service: PostService, share_service: ShareService
    ) -> SharePostUseCase:
        """Provide share post use case."""
        return SharePostUseCase(post_service=post_service, share_service=share_service)

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self, feed_service: FeedService, user_service: UserService
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(feed_service=feed_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_compare_countries_use_case(
        self,
        feed_service: FeedService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> CompareCountriesUseCase:
        """Provide compare countries use case."""
        return CompareCountriesUseCase(
            feed_service=feed_service,
            user_service=user_service,
            feed_settings=feed_settings,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_set_user_active_use_case(
        self, user_service: UserService
    ) -> SetUserActiveUseCase:
        """Provide set user active use case."""
        return SetUserActiveUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_all_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListAllPostsUseCase:
        """Provide list all posts use case."""
        return ListAllPostsUseCase(post_service=post_service, user_service=user_service)

    # Theme use cases
    @provide(scope=Scope.REQUEST)
    def get_get_theme_use_case(self, theme_service: ThemeService) -> GetThemeUseCase:
        """Provide get theme use case."""
        return GetThemeUseCase(theme_service=theme_service)

    @provide(scope=Scope.REQUEST)
    def get_update_theme_use_case(
        self, theme_service: ThemeService
    ) -> UpdateThemeUseCase:
        """Provide update theme use case."""
        return UpdateThemeUseCase(theme_service=theme_service)

    # Reference data use cases
    @provide(scope=Scope.APP)
    def get_list_countries_use_case(self) -> ListCountriesUseCase:
        """Provide list countries use case."""
        return ListCountriesUseCase()

    @provide(scope=Scope.APP)
    def get_list_categories_use_case(self) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase()
