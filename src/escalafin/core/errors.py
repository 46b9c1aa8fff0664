"""
Error classes for EscalaFin.

This module defines the exception classes raised when tariff configuration is
structurally invalid. Loan calculations themselves never raise for numeric
input; see ``escalafin.core.engine`` and ``escalafin.core.validation``.
"""


class ConfigError(Exception):
    """
    Tariff configuration error.

    Raised when a tariff configuration cannot be turned into a usable
    ``TariffConfig``: missing sections, non-numeric values, an empty rate
    table, a non-positive over-limit step or duplicated table amounts.

    **Example Usage:**
        ```python
        from escalafin.core.errors import ConfigError
        from escalafin.core.tariffs import TariffConfig

        try:
            TariffConfig.from_dict({"fixedFee": {}})
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass


class TariffWarning(UserWarning):
    """Warning for tariff tables that had to be normalised."""
