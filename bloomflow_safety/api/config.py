"""
BloomFlow Safety — API Configuration

FastAPI server settings and the engine configuration it serves.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """API server configuration"""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Engine
    config_path: Optional[str] = None     # SafetyConfig YAML
    catalog_path: Optional[str] = None    # overrides classifier.catalog_path

    # API
    api_prefix: str = "/api"
    api_title: str = "BloomFlow Safety API"
    api_description: str = "Symptom red flags, escalation and compliance scoring"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Configuration from SAFETY_* environment variables"""
        origins = os.getenv("SAFETY_API_CORS_ORIGINS")
        return cls(
            host=os.getenv("SAFETY_API_HOST", "0.0.0.0"),
            port=int(os.getenv("SAFETY_API_PORT", "8000")),
            debug=os.getenv("SAFETY_API_DEBUG", "false").lower() == "true",
            cors_origins=origins.split(",") if origins else ["*"],
            config_path=os.getenv("SAFETY_CONFIG_PATH"),
            catalog_path=os.getenv("SAFETY_CATALOG_PATH"),
        )


# Global configuration
config = APIConfig.from_env()
