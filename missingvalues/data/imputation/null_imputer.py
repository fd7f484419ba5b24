"""Imputation that performs no imputation."""

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.imputation.base_imputer import BaseImputer


class NullImputer(BaseImputer[None]):
    """Dummy, performs no imputation."""

    def _create_state(self, data: Dataset) -> None:
        return None

    def _apply_instance(self, instance: Instance, state: None, context: ApplyContext) -> Instance:
        return instance.clone()
