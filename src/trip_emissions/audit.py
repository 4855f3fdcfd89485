import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


class CalculationAudit:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(CalculationAudit, cls).__new__(cls)
            cls._instance.initialized = False
        return cls._instance

    def __init__(self):
        if self.initialized:
            return

        self.enabled = True
        self.initialized = True

    def log_calculation(self, context: str, formula: str, variables: Dict[str, Any], result: float, unit: str = ""):
        """
        Record a calculation step on the audit logger (DEBUG level).

        Args:
            context: Description of what is being calculated (e.g., "Emission: car")
            formula: Text representation of equation (e.g., "Distance * EF")
            variables: Dict of actual values used (e.g., {"Distance_km": 430, "EF": 0.12})
            result: The final result
            unit: Unit of the result (e.g., "kgCO2")
        """
        if not self.enabled or not logger.isEnabledFor(logging.DEBUG):
            return

        vars_str = ", ".join([f"{k}={v}" for k, v in variables.items()])
        logger.debug(
            "%s | Formula: %s | Inputs: %s | Result: %.4f %s",
            context, formula, vars_str, result, unit
        )


# Global Accessor
audit_logger = CalculationAudit()
