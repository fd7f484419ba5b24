"""Injection that replaces the class values."""

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.injection.base_injector import BaseInjector


class ClassOnlyInjector(BaseInjector[None]):
    """Injects missing values in the class attribute only.

    Rows of datasets without class attribute are returned unchanged.
    """

    def _create_state(self, data: Dataset) -> None:
        return None

    def _apply_instance(self, instance: Instance, state: None, context: ApplyContext) -> Instance:
        result = instance.clone()
        if context.source.class_index is not None:
            result.set_missing(context.source.class_index)
        return result
