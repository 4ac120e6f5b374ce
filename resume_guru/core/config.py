"""
Runtime configuration for Resume Guru API.

Settings are read from the environment once, at process start, and passed
into each service explicitly.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


@dataclass(frozen=True)
class Settings:
    # ✅ LLM (OpenRouter / any OpenAI-compatible endpoint)
    llm_api_key: Optional[str] = None
    llm_base_url: str = "https://openrouter.ai/api/v1"
    llm_model: str = "openai/gpt-4o"
    llm_timeout_seconds: float = 60.0

    # ✅ Public identity of this app
    app_public_url: str = "https://resumeguru.onrender.com"
    app_title: str = "Ultra Resume Guru"

    # ✅ PhonePe
    phonepe_merchant_id: Optional[str] = None
    phonepe_salt_key: Optional[str] = None
    phonepe_salt_index: int = 1
    phonepe_base_url: str = "https://api-preprod.phonepe.com/apis/pg-sandbox"

    # ✅ Cashfree
    cashfree_app_id: Optional[str] = None
    cashfree_secret_key: Optional[str] = None
    cashfree_base_url: str = "https://sandbox.cashfree.com"

    payment_timeout_seconds: float = 30.0

    # ✅ Server
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    port: int = 5000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        origins = _env("ALLOWED_ORIGINS", "*")
        return cls(
            llm_api_key=_env("OPENROUTER_API_KEY"),
            llm_base_url=_env("LLM_BASE_URL", cls.llm_base_url),
            llm_model=_env("LLM_MODEL", cls.llm_model),
            llm_timeout_seconds=float(_env("LLM_TIMEOUT_SECONDS", "60")),
            app_public_url=_env("APP_PUBLIC_URL", cls.app_public_url).rstrip("/"),
            app_title=_env("APP_TITLE", cls.app_title),
            phonepe_merchant_id=_env("PHONEPE_MERCHANT_ID"),
            phonepe_salt_key=_env("PHONEPE_SALT_KEY"),
            phonepe_salt_index=int(_env("PHONEPE_SALT_INDEX", "1")),
            phonepe_base_url=_env("PHONEPE_BASE_URL", cls.phonepe_base_url).rstrip("/"),
            cashfree_app_id=_env("CASHFREE_APP_ID"),
            cashfree_secret_key=_env("CASHFREE_SECRET_KEY"),
            cashfree_base_url=_env("CASHFREE_BASE_URL", cls.cashfree_base_url).rstrip("/"),
            payment_timeout_seconds=float(_env("PAYMENT_TIMEOUT_SECONDS", "30")),
            allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=_env("LOG_LEVEL", "INFO"),
            log_dir=_env("LOG_DIR"),
            port=int(_env("PORT", "5000")),
        )

    @property
    def phonepe_redirect_url(self) -> str:
        return f"{self.app_public_url}/payment-status"

    @property
    def phonepe_callback_url(self) -> str:
        return f"{self.app_public_url}/webhook/phonepe"

    def summary(self) -> dict:
        """Configuration snapshot for startup logs. Sanitize before logging."""
        return {
            "llm_base_url": self.llm_base_url,
            "llm_model": self.llm_model,
            "llm_api_key": self.llm_api_key,
            "phonepe_base_url": self.phonepe_base_url,
            "phonepe_merchant_id": self.phonepe_merchant_id,
            "phonepe_salt_key": self.phonepe_salt_key,
            "cashfree_base_url": self.cashfree_base_url,
            "cashfree_secret_key": self.cashfree_secret_key,
            "allowed_origins": ",".join(self.allowed_origins),
            "port": self.port,
        }
