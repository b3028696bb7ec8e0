"""Step-by-step cooking walkthrough."""

from dataclasses import dataclass, replace

from culinary_companion.domain.recipes import Recipe


@dataclass(frozen=True)
class CookingWalkthrough:
    """Position within a recipe's instructions."""

    recipe: Recipe
    step_index: int = 0

    def __post_init__(self) -> None:
        if not self.recipe.instructions:
            raise ValueError("Recipe has no instructions to walk through")
        if not 0 <= self.step_index < len(self.recipe.instructions):
            raise ValueError(f"Step index out of range: {self.step_index}")

    @property
    def total_steps(self) -> int:
        return len(self.recipe.instructions)

    @property
    def current_step(self) -> str:
        return self.recipe.instructions[self.step_index]

    @property
    def label(self) -> str:
        return f"Step {self.step_index + 1} of {self.total_steps}"

    @property
    def progress_percent(self) -> float:
        return (self.step_index + 1) / self.total_steps * 100

    @property
    def is_first(self) -> bool:
        return self.step_index == 0

    @property
    def is_last(self) -> bool:
        return self.step_index == self.total_steps - 1

    def next(self) -> "CookingWalkthrough":
        """Advance one step; stays on the last step."""
        if self.is_last:
            return self
        return replace(self, step_index=self.step_index + 1)

    def previous(self) -> "CookingWalkthrough":
        """Go back one step; stays on the first step."""
        if self.is_first:
            return self
        return replace(self, step_index=self.step_index - 1)
