# Ensure registration happens by importing modules
from .base import Rule, RuleResult, register, rule_registry  # noqa
from . import paired_half_price  # noqa
