"""Wiring — opens the store and builds services with their repositories injected."""

import logging
from dataclasses import dataclass
from pathlib import Path

from bookkeeper.application.interfaces import KeyValueStore
from bookkeeper.application.services import (
    ClientService,
    ExportService,
    InvoiceService,
    PaymentService,
    ProductService,
    SeedService,
    StatsService,
    TemplateService,
    UserService,
)
from bookkeeper.config import Settings, get_settings
from bookkeeper.domain.entities import Client, Invoice, Payment, Product, Template, User
from bookkeeper.infrastructure.logging.log_config import setup_logging
from bookkeeper.infrastructure.storage import KeyValueRecordStore, StorageKeys, open_store

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Every application service, sharing one key-value store handle."""

    kv: KeyValueStore
    keys: StorageKeys
    users: UserService
    clients: ClientService
    products: ProductService
    invoices: InvoiceService
    payments: PaymentService
    templates: TemplateService
    stats: StatsService
    seed: SeedService
    export: ExportService

    def close(self) -> None:
        self.kv.close()


def build_services(kv: KeyValueStore, keys: StorageKeys) -> ServiceContainer:
    user_store = KeyValueRecordStore(kv, keys.users, User)
    client_store = KeyValueRecordStore(kv, keys.clients, Client)
    product_store = KeyValueRecordStore(kv, keys.products, Product)
    invoice_store = KeyValueRecordStore(kv, keys.invoices, Invoice)
    payment_store = KeyValueRecordStore(kv, keys.payments, Payment)
    template_store = KeyValueRecordStore(kv, keys.templates, Template)

    return ServiceContainer(
        kv=kv,
        keys=keys,
        users=UserService(user_store, kv, keys.users, keys.current_user),
        clients=ClientService(client_store),
        products=ProductService(product_store),
        invoices=InvoiceService(invoice_store, client_store),
        payments=PaymentService(payment_store, invoice_store),
        templates=TemplateService(template_store),
        stats=StatsService(invoice_store, client_store),
        seed=SeedService(
            kv,
            {
                "users": user_store,
                "clients": client_store,
                "products": product_store,
                "invoices": invoice_store,
                "payments": payment_store,
                "templates": template_store,
            },
            initialized_key=keys.initialized,
            reset_keys=(*keys.collections(), keys.current_user),
        ),
        export=ExportService(),
    )


def bootstrap(settings: Settings | None = None, kv: KeyValueStore | None = None) -> ServiceContainer:
    """Configure logging, open the store and seed demo data if enabled."""
    settings = settings or get_settings()
    setup_logging(settings)
    if kv is None:
        kv = open_store(settings.store_url, echo=settings.log_level_sql.upper() == "DEBUG")
    services = build_services(kv, StorageKeys.with_prefix(settings.storage_key_prefix))
    if settings.seed_demo_data:
        services.seed.initialize(Path(settings.seed_file))
    logger.info("%s %s ready (%s)", settings.app_title, settings.app_version, settings.app_env)
    return services
