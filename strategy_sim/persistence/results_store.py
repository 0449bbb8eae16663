"""JSON file store for simulation result bundles."""

import json
from pathlib import Path
from typing import Any, Union

import structlog

from ..data.models import PriceSeries
from ..data.parsers import parse_results_bundle
from ..errors import MalformedDataError, PersistenceError

logger = structlog.get_logger(__name__)


class ResultsStore:
    """
    Persists ``{prices, results, failures}`` bundles as indented JSON.

    One bundle per file; writing replaces the previous bundle.
    """

    def __init__(self, output_path: Union[str, Path], create_dirs: bool = True):
        self.output_path = Path(output_path)
        self.create_dirs = create_dirs

    def write(self, bundle: dict[str, Any]) -> Path:
        """
        Write a bundle (e.g. ``AggregateResult.to_dict()``).

        Returns:
            Path written to

        Raises:
            PersistenceError: On file system or encoding errors
        """
        # Write beside the target and swap so readers never see a partial file
        tmp_path = self.output_path.with_name(self.output_path.name + ".tmp")

        try:
            if self.create_dirs:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(tmp_path, "w") as f:
                json.dump(bundle, f, indent=2, default=str)
            tmp_path.replace(self.output_path)

        except (OSError, TypeError, ValueError) as e:
            tmp_path.unlink(missing_ok=True)
            logger.error(
                "Result bundle write failed",
                output_path=str(self.output_path),
                error=str(e),
            )
            raise PersistenceError(
                f"Failed to write results: {e}",
                operation="write",
                target=str(self.output_path),
            )

        logger.info(
            "Result bundle written",
            output_path=str(self.output_path),
            strategies=list(bundle.get("results", {})),
        )
        return self.output_path

    def read(self) -> dict[str, Any]:
        """
        Read the stored bundle.

        Raises:
            PersistenceError: If the file cannot be read
            MalformedDataError: If the file is not valid JSON
        """
        try:
            with open(self.output_path) as f:
                return json.load(f)  # type: ignore[no-any-return]
        except json.JSONDecodeError as e:
            raise MalformedDataError(
                f"Result bundle is not valid JSON: {e}",
                expected_format="json",
            )
        except OSError as e:
            raise PersistenceError(
                f"Failed to read results: {e}",
                operation="read",
                target=str(self.output_path),
            )

    def load_series(self) -> PriceSeries:
        """Rebuild the price series stored in the bundle."""
        return parse_results_bundle(self.read())
