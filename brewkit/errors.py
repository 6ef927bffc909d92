from __future__ import annotations

from typing import Iterable


class BeverageDefinitionError(TypeError):
    pass


class IncompleteBeverageError(BeverageDefinitionError):
    def __init__(self, class_name: str, missing: Iterable[str]):
        self.class_name = class_name
        self.missing = tuple(sorted(missing))
        super().__init__(
            f"{class_name} must override the required step(s): {', '.join(self.missing)}"
        )


class TemplateOverrideError(BeverageDefinitionError):
    def __init__(self, class_name: str, method: str):
        self.class_name = class_name
        self.method = method
        super().__init__(
            f"{class_name} may not override '{method}'; customize the individual steps instead"
        )
