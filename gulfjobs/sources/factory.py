from typing import Optional

from gulfjobs.sources import DataSource
from gulfjobs.utils.config import Settings, settings as default_settings


def build_source(config: Optional[Settings] = None) -> DataSource:
    """Instantiate the data source named by ``data_backend``."""

    config = config or default_settings
    backend = config.data_backend.lower()

    if backend == "supabase":
        from gulfjobs.sources.supabase import SupabaseSource

        return SupabaseSource(
            config.supabase_url,
            config.supabase_key,
            jobs_table=config.jobs_table,
            applications_table=config.applications_table,
            timeout=config.request_timeout_seconds,
        )
    if backend == "database":
        from gulfjobs.database.operations import Database

        return Database(config.database_url)

    raise ValueError(f"Unknown data backend: {config.data_backend!r}")
