"""Injection that performs no injection."""

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.injection.base_injector import BaseInjector


class NullInjector(BaseInjector[None]):
    """Dummy, performs no injection."""

    def _create_state(self, data: Dataset) -> None:
        return None

    def _apply_instance(self, instance: Instance, state: None, context: ApplyContext) -> Instance:
        return instance.clone()
