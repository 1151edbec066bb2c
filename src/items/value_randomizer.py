"""
Randomized monetary value for freshly drawn loot.

Every drawn item is worth its base value times a d4, so two copies of the
same template from one roll usually end up with different prices.
"""

import logging
from typing import Iterable, Optional

from src.data_models import DiceRoller, ItemInstance, ItemTemplate

logger = logging.getLogger(__name__)


class ValueRandomizer:
    """Turns templates into instances with an independent value multiplier each."""

    MULTIPLIER_DIE = "1d4"

    def __init__(self, dice: Optional[DiceRoller] = None):
        self.dice = dice or DiceRoller()

    def roll_multiplier(self, reason: str = "value multiplier") -> int:
        """Roll one multiplier in {1, 2, 3, 4}."""
        return self.dice.roll(self.MULTIPLIER_DIE, reason).total

    def apply(self, template: ItemTemplate) -> ItemInstance:
        """
        Create an instance of a template with a randomized value.

        Args:
            template: The catalog template

        Returns:
            A new instance whose value is base_value times the rolled multiplier
        """
        multiplier = self.roll_multiplier(f"value of {template.template_id}")
        instance = ItemInstance.from_template(template, value_multiplier=multiplier)
        logger.debug(
            f"{template.name}: {template.base_value} x{multiplier} = {instance.value}"
        )
        return instance

    def apply_all(self, templates: Iterable[ItemTemplate]) -> list[ItemInstance]:
        return [self.apply(template) for template in templates]
