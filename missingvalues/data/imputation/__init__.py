"""Imputation algorithms: fill in missing values."""

from missingvalues.data.imputation.base_imputer import BaseImputer, BaseImputerConfig
from missingvalues.data.imputation.irmi_imputer import IRMIConfig, IRMIImputerService
from missingvalues.data.imputation.knn_imputer import KNNImputerConfig, KNNImputerService
from missingvalues.data.imputation.means_modes_imputer import MeansModesImputer
from missingvalues.data.imputation.multi_imputer import MultiImputer, MultiImputerConfig
from missingvalues.data.imputation.null_imputer import NullImputer
from missingvalues.data.imputation.supervised_imputer import (
    SupervisedPredictionConfig,
    SupervisedPredictionImputer,
)
from missingvalues.data.imputation.user_values_imputer import (
    UserSuppliedValuesConfig,
    UserSuppliedValuesImputer,
)

__all__ = [
    "BaseImputer",
    "BaseImputerConfig",
    "IRMIConfig",
    "IRMIImputerService",
    "KNNImputerConfig",
    "KNNImputerService",
    "MeansModesImputer",
    "MultiImputer",
    "MultiImputerConfig",
    "NullImputer",
    "SupervisedPredictionConfig",
    "SupervisedPredictionImputer",
    "UserSuppliedValuesConfig",
    "UserSuppliedValuesImputer",
]
