from atomic_css.rules.generator import config_to_rules
from atomic_css.rules.model import Rule, RuleTable

__all__ = ["config_to_rules", "Rule", "RuleTable"]
