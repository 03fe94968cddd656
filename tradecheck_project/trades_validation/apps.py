from django.apps import AppConfig


class TradesValidationConfig(AppConfig):
    name = "trades_validation"
    verbose_name = "Trades Validation"
