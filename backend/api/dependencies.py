"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations. Secrets are read from
Settings here and passed in, never read by the modules themselves.

When we're ready to extract a module to a microservice, we only need
to change the implementation here to an HTTP client.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import ICredentialVerifier
    from modules.auth.strategies import SelfIssuedTokenStrategy
    from modules.catalog.service import CatalogService
    from modules.notifications.interfaces import INotificationDispatcher
    from modules.outreach.service import OutreachService
    from modules.payments.interfaces import IOrderRepository, IPaymentGateway
    from modules.payments.ledger import OrderLedger
    from modules.payments.reconciler import PaymentReconciler
    from modules.users.service import AccountService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self.reset()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the service-role Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def _build_auth(self) -> None:
        from modules.auth.service import build_credential_verifier
        self._credential_verifier, self._token_strategy = build_credential_verifier(
            self.settings, self.db
        )

    @property
    def credential_verifier(self) -> "ICredentialVerifier":
        """Get the bearer credential verifier."""
        if self._credential_verifier is None:
            self._build_auth()
        return self._credential_verifier

    @property
    def token_strategy(self) -> "SelfIssuedTokenStrategy":
        """Get the self-issued token strategy (used to mint session tokens)."""
        if self._token_strategy is None:
            self._build_auth()
        return self._token_strategy

    # -------------------------------------------------------------------------
    # Payments
    # -------------------------------------------------------------------------

    @property
    def order_repository(self) -> "IOrderRepository":
        if self._order_repository is None:
            from modules.payments.repository import OrderRepository
            self._order_repository = OrderRepository(self.db)
        return self._order_repository

    @property
    def payment_gateway(self) -> "IPaymentGateway":
        if self._payment_gateway is None:
            from modules.payments.gateway import RazorpayGateway
            settings = self.settings
            self._payment_gateway = RazorpayGateway(
                key_id=settings.razorpay_key_id,
                key_secret=settings.razorpay_key_secret,
                api_url=settings.razorpay_api_url,
                timeout=settings.gateway_timeout_seconds,
            )
        return self._payment_gateway

    @property
    def order_ledger(self) -> "OrderLedger":
        if self._order_ledger is None:
            from modules.payments.ledger import OrderLedger
            self._order_ledger = OrderLedger(
                repository=self.order_repository,
                gateway=self.payment_gateway,
                currency=self.settings.currency,
            )
        return self._order_ledger

    @property
    def payment_reconciler(self) -> "PaymentReconciler":
        if self._payment_reconciler is None:
            from modules.payments.reconciler import PaymentReconciler
            self._payment_reconciler = PaymentReconciler(
                repository=self.order_repository,
                gateway_secret=self.settings.razorpay_key_secret,
            )
        return self._payment_reconciler

    # -------------------------------------------------------------------------
    # Accounts and notifications
    # -------------------------------------------------------------------------

    @property
    def notifications(self) -> "INotificationDispatcher":
        if self._notifications is None:
            from modules.notifications.service import SmtpEmailDispatcher
            settings = self.settings
            self._notifications = SmtpEmailDispatcher(
                host=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_username,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
                sender=settings.email_from,
            )
        return self._notifications

    @property
    def accounts(self) -> "AccountService":
        if self._accounts is None:
            from shared.database import get_supabase_auth_client
            from modules.users.directory import SupabaseUserDirectory
            from modules.users.repository import UserRepository
            from modules.users.service import AccountService
            settings = self.settings
            self._accounts = AccountService(
                directory=SupabaseUserDirectory(
                    self.db,
                    auth_client_factory=get_supabase_auth_client,
                    redirect_url=settings.frontend_url,
                ),
                repository=UserRepository(self.db),
                tokens=self.token_strategy,
                notifications=self.notifications,
                check_deliverability=settings.email_check_deliverability,
                send_login_notifications=settings.send_login_notifications,
            )
        return self._accounts

    # -------------------------------------------------------------------------
    # Catalog and outreach
    # -------------------------------------------------------------------------

    @property
    def catalog(self) -> "CatalogService":
        if self._catalog is None:
            from modules.catalog.repository import CourseRepository
            from modules.catalog.service import CatalogService
            self._catalog = CatalogService(CourseRepository(self.db))
        return self._catalog

    @property
    def outreach(self) -> "OutreachService":
        if self._outreach is None:
            from modules.outreach.repository import OutreachRepository
            from modules.outreach.service import OutreachService
            self._outreach = OutreachService(OutreachRepository(self.db))
        return self._outreach

    async def shutdown(self) -> None:
        """Let queued emails finish before the process exits."""
        if self._accounts is not None:
            await self._accounts.drain_notifications()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db: "Client | None" = None
        self._credential_verifier: "ICredentialVerifier | None" = None
        self._token_strategy: "SelfIssuedTokenStrategy | None" = None
        self._order_repository: "IOrderRepository | None" = None
        self._payment_gateway: "IPaymentGateway | None" = None
        self._order_ledger: "OrderLedger | None" = None
        self._payment_reconciler: "PaymentReconciler | None" = None
        self._notifications: "INotificationDispatcher | None" = None
        self._accounts: "AccountService | None" = None
        self._catalog: "CatalogService | None" = None
        self._outreach: "OutreachService | None" = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_credential_verifier() -> "ICredentialVerifier":
    """FastAPI dependency for the credential verifier."""
    return get_container().credential_verifier


def get_order_ledger() -> "OrderLedger":
    """FastAPI dependency for the order ledger."""
    return get_container().order_ledger


def get_payment_reconciler() -> "PaymentReconciler":
    """FastAPI dependency for the payment reconciler."""
    return get_container().payment_reconciler


def get_account_service() -> "AccountService":
    """FastAPI dependency for the account service."""
    return get_container().accounts


def get_catalog_service() -> "CatalogService":
    """FastAPI dependency for the course catalog."""
    return get_container().catalog


def get_outreach_service() -> "OutreachService":
    """FastAPI dependency for enquiries, contact and newsletter."""
    return get_container().outreach
