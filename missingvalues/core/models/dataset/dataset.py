"""Dataset model: an ordered schema plus conforming rows."""

# Standard Library Imports
from typing import Iterable, Iterator, List, Optional, Sequence

# Third Party Imports
import numpy as np
import pandas as pd
from pydantic import BaseModel, Field, model_validator

# Internal Imports
from missingvalues.core.exceptions.models.dataset import SchemaMismatchError
from missingvalues.core.models.dataset.attribute import Attribute, format_date
from missingvalues.core.models.dataset.instance import Instance, is_missing
from missingvalues.utils.constants import AttributeType, MISSING_VALUE
from missingvalues.utils.logging import get_logger

# Initialize logger
logger = get_logger(__name__)


class Dataset(BaseModel):
    """Tabular dataset consisting of a schema and rows.

    Attributes:
        relation_name: The name of the dataset
        attributes: The ordered schema
        instances: The rows, each conforming to the schema
        class_index: Index of the target/class attribute, None if there is none
    """

    relation_name: str = Field(default="dataset", description="The name of the dataset.")
    attributes: List[Attribute] = Field(
        default_factory=list, description="The ordered schema of the dataset."
    )
    instances: List[Instance] = Field(
        default_factory=list, description="The rows of the dataset."
    )
    class_index: Optional[int] = Field(
        default=None, description="Index of the class attribute, None if not set."
    )

    @model_validator(mode="after")
    def _validate_schema(self) -> "Dataset":
        if self.class_index is not None and not 0 <= self.class_index < len(self.attributes):
            raise SchemaMismatchError(
                f"Class index {self.class_index} outside of {len(self.attributes)} attributes"
            )
        for instance in self.instances:
            self.check_instance(instance)
        return self

    # ------------------------------------------------------------------
    # schema access

    @property
    def num_attributes(self) -> int:
        return len(self.attributes)

    @property
    def num_instances(self) -> int:
        return len(self.instances)

    @property
    def attribute_names(self) -> List[str]:
        return [att.name for att in self.attributes]

    def attribute(self, index: int) -> Attribute:
        return self.attributes[index]

    def index_of_attribute(self, name: str) -> Optional[int]:
        """Get the index of the attribute with the given name, None if absent."""
        for i, att in enumerate(self.attributes):
            if att.name == name:
                return i
        return None

    def class_attribute(self) -> Optional[Attribute]:
        if self.class_index is None:
            return None
        return self.attributes[self.class_index]

    def check_instance(self, instance: Instance) -> None:
        """Check that a row conforms positionally to the schema.

        Args:
            instance: The row to check

        Raises:
            SchemaMismatchError: If the arity or a label index does not match
        """
        if instance.num_values != self.num_attributes:
            raise SchemaMismatchError(
                f"Row has {instance.num_values} values, schema '{self.relation_name}' "
                f"has {self.num_attributes} attributes"
            )
        for i, att in enumerate(self.attributes):
            if not (att.is_nominal or att.is_string):
                continue
            value = instance.values[i]
            if is_missing(value):
                continue
            if value != int(value) or not 0 <= value < att.num_values:
                raise SchemaMismatchError(
                    f"Value {value} is not a valid label index for attribute '{att.name}'"
                )

    # ------------------------------------------------------------------
    # copying

    def header(self) -> "Dataset":
        """Create a zero-row copy of the dataset (the schema only)."""
        return Dataset(
            relation_name=self.relation_name,
            attributes=[att.copy_attribute() for att in self.attributes],
            class_index=self.class_index,
        )

    def clone(self) -> "Dataset":
        """Create an independent copy of the dataset, rows included."""
        result = self.header()
        result.instances = [inst.clone() for inst in self.instances]
        return result

    def with_instances(self, instances: Iterable[Instance]) -> "Dataset":
        """Create a dataset with the same schema and the given rows."""
        result = self.header()
        for inst in instances:
            result.add(inst)
        return result

    def add(self, instance: Instance) -> None:
        """Append a row after checking it against the schema."""
        self.check_instance(instance)
        self.instances.append(instance)

    # ------------------------------------------------------------------
    # row access and statistics

    def __len__(self) -> int:
        return self.num_instances

    def __iter__(self) -> Iterator[Instance]:  # type: ignore[override]
        return iter(self.instances)

    def __getitem__(self, index: int) -> Instance:
        return self.instances[index]

    def column(self, index: int) -> np.ndarray:
        """Get the values of one attribute over all rows."""
        return np.array([inst.values[index] for inst in self.instances], dtype=float)

    def weights(self) -> np.ndarray:
        return np.array([inst.weight for inst in self.instances], dtype=float)

    def to_matrix(self) -> np.ndarray:
        """Get the values of all rows as a (rows x attributes) matrix."""
        if not self.instances:
            return np.empty((0, self.num_attributes))
        return np.vstack([inst.values for inst in self.instances])

    def missing_count(self, index: int) -> int:
        return int(np.isnan(self.column(index)).sum())

    def sum_of_weights(self) -> float:
        return float(sum(inst.weight for inst in self.instances))

    def string_value(self, instance: Instance, index: int) -> str:
        """Render a value of a row as text.

        Args:
            instance: The row
            index: The attribute index

        Returns:
            str: The label for nominal/string attributes, the number otherwise;
                "?" for missing values
        """
        value = instance.values[index]
        if is_missing(value):
            return "?"
        att = self.attributes[index]
        if att.is_nominal or att.is_string:
            return att.value(int(value))
        if att.is_date:
            return format_date(value)
        return repr(float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return (
            self.relation_name == other.relation_name
            and self.attributes == other.attributes
            and self.class_index == other.class_index
            and self.instances == other.instances
        )

    def __str__(self) -> str:
        return (
            f"{self.relation_name}: {self.num_attributes} attributes, "
            f"{self.num_instances} rows, class index {self.class_index}"
        )

    # ------------------------------------------------------------------
    # pandas bridge

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        class_column: Optional[str] = None,
        string_columns: Sequence[str] = (),
        relation_name: str = "dataset",
    ) -> "Dataset":
        """Convert a DataFrame into a dataset.

        Numeric columns become numeric attributes, datetime columns date
        attributes, columns listed in ``string_columns`` string attributes and
        every other column a nominal attribute (categorical columns keep their
        category order, other columns use the sorted distinct values).

        Args:
            df: The DataFrame to convert
            class_column: Name of the column to use as class attribute
            string_columns: Columns to treat as free text
            relation_name: Name of the dataset

        Returns:
            Dataset: The converted dataset
        """
        attributes: List[Attribute] = []
        columns: List[np.ndarray] = []
        for name in df.columns:
            series = df[name]
            mask = series.isna().to_numpy()
            encoded = np.full(len(series), MISSING_VALUE)
            if name in string_columns:
                att = Attribute(name=str(name), type=AttributeType.STRING)
                for i, item in enumerate(series):
                    if not mask[i]:
                        encoded[i] = att.add_string_value(str(item))
            elif pd.api.types.is_datetime64_any_dtype(series):
                att = Attribute(name=str(name), type=AttributeType.DATE)
                seconds = (series - pd.Timestamp("1970-01-01")) / pd.Timedelta(seconds=1)
                encoded[~mask] = seconds.to_numpy()[~mask]
            elif pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
                att = Attribute(name=str(name), type=AttributeType.NUMERIC)
                encoded[~mask] = series.to_numpy(dtype=float, na_value=np.nan)[~mask]
            else:
                if isinstance(series.dtype, pd.CategoricalDtype):
                    labels = [str(c) for c in series.cat.categories]
                else:
                    labels = sorted({str(item) for item in series[~mask]})
                att = Attribute(name=str(name), type=AttributeType.NOMINAL, labels=labels)
                for i, item in enumerate(series):
                    if not mask[i]:
                        encoded[i] = att.encode(str(item))
            attributes.append(att)
            columns.append(encoded)

        class_index = None
        if class_column is not None:
            class_index = list(df.columns).index(class_column)

        matrix = np.column_stack(columns) if columns else np.empty((len(df), 0))
        instances = [Instance(values=row) for row in matrix]
        logger.debug(f"Converted DataFrame with shape {df.shape} into dataset '{relation_name}'")
        return cls(
            relation_name=relation_name,
            attributes=attributes,
            instances=instances,
            class_index=class_index,
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the dataset into a DataFrame (labels decoded, NaN for missing)."""
        matrix = self.to_matrix()
        data = {}
        for i, att in enumerate(self.attributes):
            column = matrix[:, i]
            if att.is_nominal:
                codes = np.where(np.isnan(column), -1, np.nan_to_num(column, nan=-1)).astype(int)
                data[att.name] = pd.Categorical.from_codes(codes, categories=att.labels)
            elif att.is_string:
                data[att.name] = [
                    None if is_missing(v) else att.value(int(v)) for v in column
                ]
            elif att.is_date:
                data[att.name] = pd.to_datetime(column, unit="s")
            else:
                data[att.name] = column
        return pd.DataFrame(data, columns=self.attribute_names)
