"""Exceptions raised by the mapping layer and the validation engine."""


class MappingError(Exception):
    """A class cannot be described or instantiated by the mapping layer."""


class MappingValidationError(MappingError):
    """Validation found a violation at or beyond the fatal level.

    Carries every violation collected during the run, worst first, not just
    the one that crossed the threshold.
    """

    def __init__(self, violations):
        self.violations = tuple(violations)
        super().__init__(self._describe(self.violations))

    @staticmethod
    def _describe(violations: tuple) -> str:
        lines = [f"Number of violations: {len(violations)}"]
        lines.extend(v.render() for v in violations)
        return "\n".join(lines)


class UnclassifiedViolationError(RuntimeError):
    """A violation reached log dispatch with a level that has no log mapping.

    Indicates a defect in the engine configuration or a constraint, never in
    the mapping metadata being validated.
    """
