"""
Built-in pattern catalog.

Importing this package registers every example in the default registry.
Import order is registration order: SOLID principles, then creational,
structural and behavioral patterns.
"""

# isort: off
from pattern_spine.patterns import solid  # noqa: F401
from pattern_spine.patterns import creational  # noqa: F401
from pattern_spine.patterns import structural  # noqa: F401
from pattern_spine.patterns import behavioral  # noqa: F401
# isort: on
