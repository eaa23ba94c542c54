"""Domain policies package."""

from .pricing import PricingPolicy

__all__ = ["PricingPolicy"]
