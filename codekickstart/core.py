from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from codekickstart.application.bookmarks.use_cases.bookmark_use_case import BookmarkUseCase
from codekickstart.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from codekickstart.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from codekickstart.application.identity.use_cases.register_user_use_case import (
    RegisterUserUseCase,
)
from codekickstart.application.tutor.use_cases.chat_use_case import ChatUseCase
from codekickstart.infrastructure.ai.tutor_gateway import TutorGateway
from codekickstart.infrastructure.bookmarks.repositories import BookmarkRepository
from codekickstart.infrastructure.catalog.repositories import LanguageRepository
from codekickstart.infrastructure.identity.repositories import UserRepository
from codekickstart.infrastructure.identity.services import (
    PasswordServiceAdapter,
    TokenServiceAdapter,
)
from codekickstart.infrastructure.tutor.repositories import ChatMessageRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped session, provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    language_repository = providers.Factory(LanguageRepository, db=db)
    bookmark_repository = providers.Factory(BookmarkRepository, db=db)
    chat_message_repository = providers.Factory(ChatMessageRepository, db=db)
    user_repository = providers.Factory(UserRepository, db=db)

    # Stateless services
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)
    tutor_gateway = providers.Singleton(TutorGateway)

    # Catalog
    catalog_use_case = providers.Factory(
        CatalogUseCase,
        language_repository=language_repository,
    )

    # Bookmarks
    bookmark_use_case = providers.Factory(
        BookmarkUseCase,
        bookmark_repository=bookmark_repository,
        language_repository=language_repository,
    )

    # Tutor
    chat_use_case = providers.Factory(
        ChatUseCase,
        chat_message_repository=chat_message_repository,
        language_repository=language_repository,
        tutor_gateway=tutor_gateway,
    )

    # Identity
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )


container = Container()
