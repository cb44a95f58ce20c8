"""
Configuration Management for Personal Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The aggregation engine itself never reads configuration.
Settings are read by the dashboard facade and handed to the engine as
plain arguments, so the same engine works with any bracket table.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.models.results import TaxBracket, TaxParameters


def _default_brackets() -> list[TaxBracket]:
    """Thai personal income tax table (illustrative, single year)."""
    return [
        TaxBracket(lower=Decimal("0"), upper=Decimal("150000"), rate=Decimal("0")),
        TaxBracket(lower=Decimal("150000"), upper=Decimal("300000"), rate=Decimal("0.05")),
        TaxBracket(lower=Decimal("300000"), upper=Decimal("500000"), rate=Decimal("0.10")),
        TaxBracket(lower=Decimal("500000"), upper=Decimal("750000"), rate=Decimal("0.15")),
        TaxBracket(lower=Decimal("750000"), upper=Decimal("1000000"), rate=Decimal("0.20")),
        TaxBracket(lower=Decimal("1000000"), upper=Decimal("2000000"), rate=Decimal("0.25")),
        TaxBracket(lower=Decimal("2000000"), upper=Decimal("5000000"), rate=Decimal("0.30")),
        TaxBracket(lower=Decimal("5000000"), upper=None, rate=Decimal("0.35")),
    ]


class EngineSettings(BaseSettings):
    """Display and windowing defaults."""
    
    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    trend_window_months: int = Field(
        default=6,
        ge=1,
        le=36,
        description="Number of trailing months in the trend series"
    )
    default_locale: str = Field(
        default="th-TH",
        description="Locale used when formatting amounts"
    )
    currency_symbol: str = Field(
        default="฿",
        description="Currency symbol prefixed to formatted amounts"
    )
    
    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (False = console renderer)"
    )
    
    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class TaxSettings(BaseSettings):
    """
    Tax parameter bundle.
    
    Brackets can be overridden with a JSON list in TAX_BRACKETS, e.g.
    '[{"lower": "0", "upper": "150000", "rate": "0"}, ...]'.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="TAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    personal_allowance: Decimal = Field(
        default=Decimal("60000"),
        ge=0,
        description="Personal allowance deducted from annual income"
    )
    social_security_rate: Decimal = Field(
        default=Decimal("0.05"),
        ge=0,
        le=1,
        description="Social security contribution rate"
    )
    social_security_cap: Decimal = Field(
        default=Decimal("9000"),
        ge=0,
        description="Annual cap on social security contributions"
    )
    provident_fund_allowance: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Provident fund contribution deducted from income"
    )
    brackets: list[TaxBracket] = Field(
        default_factory=_default_brackets,
        min_length=1,
        description="Progressive bracket table"
    )
    
    def to_parameters(
        self,
        annual_income: Decimal,
        year: Optional[int] = None,
    ) -> TaxParameters:
        """Build the engine input for one annual income figure."""
        return TaxParameters(
            annual_income=annual_income,
            year=year,
            brackets=self.brackets,
            personal_allowance=self.personal_allowance,
            social_security_rate=self.social_security_rate,
            social_security_cap=self.social_security_cap,
            provident_fund_allowance=self.provident_fund_allowance,
        )


class Settings(BaseSettings):
    """
    Root settings container.
    
    Aggregates all sub-settings for easy access.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    @property
    def engine(self) -> EngineSettings:
        return EngineSettings()
    
    @property
    def tax(self) -> TaxSettings:
        return TaxSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.
    
    Returns a dict of {setting_name: is_valid}, plus {name}_error
    entries describing whatever failed.
    """
    results = {}
    
    settings = get_settings()
    
    try:
        _ = settings.engine
        results["engine"] = True
    except Exception as e:
        results["engine"] = False
        results["engine_error"] = str(e)
    
    try:
        _ = settings.tax
        results["tax"] = True
    except Exception as e:
        results["tax"] = False
        results["tax_error"] = str(e)
    
    return results
