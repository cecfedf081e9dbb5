"""Dependency injection container for services."""

from dependency_injector import containers, providers
from sqlalchemy.orm import sessionmaker

from app.config import Settings
from app.services.analytics_service import AnalyticsService
from app.services.contact_service import ContactService
from app.services.metrics_service import MetricsService
from app.services.part_service import PartService
from app.services.review_service import ReviewService
from app.services.search_service import SearchService
from app.services.seller_service import SellerService
from app.services.test_data_service import TestDataService
from app.services.upload_service import UploadService
from app.services.user_service import UserService


class ServiceContainer(containers.DeclarativeContainer):
    """Container for service dependency injection."""

    __self__ = providers.Self()

    # Configuration and database session providers
    config = providers.Dependency(instance_of=Settings)
    session_maker = providers.Dependency(instance_of=sessionmaker)
    db_session = providers.ContextLocalSingleton(
        session_maker.provided.call()
    )

    # Metrics service - Singleton so metric objects are registered once
    metrics_service = providers.Singleton(
        MetricsService,
        container=__self__,
    )

    # Service providers - Factory creates new instances for each request
    user_service = providers.Factory(UserService, db=db_session)
    seller_service = providers.Factory(
        SellerService,
        db=db_session,
        user_service=user_service
    )
    part_service = providers.Factory(
        PartService,
        db=db_session,
        seller_service=seller_service
    )
    search_service = providers.Factory(
        SearchService,
        db=db_session,
        user_service=user_service,
        metrics_service=metrics_service
    )
    review_service = providers.Factory(
        ReviewService,
        db=db_session,
        user_service=user_service,
        seller_service=seller_service,
        metrics_service=metrics_service
    )
    contact_service = providers.Factory(
        ContactService,
        db=db_session,
        user_service=user_service,
        seller_service=seller_service,
        metrics_service=metrics_service
    )
    analytics_service = providers.Factory(AnalyticsService, db=db_session)

    # Image uploads live on the local filesystem
    upload_service = providers.Factory(
        UploadService,
        settings=config,
        metrics_service=metrics_service
    )

    # Demo dataset loader
    test_data_service = providers.Factory(
        TestDataService,
        db=db_session,
        user_service=user_service,
        seller_service=seller_service,
        part_service=part_service,
        review_service=review_service,
        search_service=search_service,
        contact_service=contact_service
    )
