"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_decision.domain.models import DecisionRules


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-engine"
    log_level: str = "INFO"
    metrics_enabled: bool = True

    # Loan bounds (euros / months)
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60

    # Customer age cutoffs (years)
    minimum_age: int = 18
    maximum_age: int = 70

    # Credit modifiers per segment
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    # Age factor breakpoints: rises 0.5 -> 1.0, plateau, falls 1.0 -> 0.5
    age_factor_rise_start: int = 19
    age_factor_plateau_start: int = 30
    age_factor_plateau_end: int = 50
    age_factor_fall_end: int = 70

    def decision_rules(self) -> DecisionRules:
        """Build the immutable rule set handed to the decision engine"""
        return DecisionRules(
            minimum_loan_amount=self.minimum_loan_amount,
            maximum_loan_amount=self.maximum_loan_amount,
            minimum_loan_period=self.minimum_loan_period,
            maximum_loan_period=self.maximum_loan_period,
            minimum_age=self.minimum_age,
            maximum_age=self.maximum_age,
            segment_1_credit_modifier=self.segment_1_credit_modifier,
            segment_2_credit_modifier=self.segment_2_credit_modifier,
            segment_3_credit_modifier=self.segment_3_credit_modifier,
            age_factor_rise_start=self.age_factor_rise_start,
            age_factor_plateau_start=self.age_factor_plateau_start,
            age_factor_plateau_end=self.age_factor_plateau_end,
            age_factor_fall_end=self.age_factor_fall_end,
        )


settings = Settings()
