from stylescale.rules.errors import RuleSyntaxError
from stylescale.rules.matcher import matches, matching_selectors
from stylescale.rules.model import ClassOrId, Selector
from stylescale.rules.parser import parse_rule

__all__ = [
    "RuleSyntaxError",
    "matches",
    "matching_selectors",
    "ClassOrId",
    "Selector",
    "parse_rule",
]
