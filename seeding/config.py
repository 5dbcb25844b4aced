import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from labelops.errors import ConfigurationError


load_dotenv()


def _first_env(*names: str, default: str = "") -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


@dataclass
class SupabaseConfig:
    """Credentials for the hosted Supabase (PostgREST) database."""

    url: str = field(default_factory=lambda: _first_env("SUPABASE_URL", "VITE_SUPABASE_URL"))
    key: str = field(
        default_factory=lambda: _first_env(
            "SUPABASE_KEY", "SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY"
        )
    )

    def validate(self) -> None:
        if not self.url or not self.key:
            raise ConfigurationError(
                "Missing Supabase credentials: set SUPABASE_URL and SUPABASE_KEY "
                "(or their VITE_ equivalents) in the environment or .env file"
            )

    @property
    def rest_url(self) -> str:
        return f"{self.url.rstrip('/')}/rest/v1"


@dataclass
class RunnerConfig:
    """Runtime knobs for the seeding commands."""

    output_dir: str = field(default_factory=lambda: os.getenv("LABELOPS_OUTPUT_DIR", "data/results"))
    labels_file: str = "simulated_labels.csv"
    performance_file: str = "labeler_performance.csv"
