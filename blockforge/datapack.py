"""Datapack generation from raw weapon configurations."""

from typing import Any, Optional, Tuple

from loguru import logger

from blockforge.config.settings import DatapackConfig
from blockforge.generator import build_artifacts
from blockforge.models.schemas import DatapackArtifacts
from blockforge.normalizer import normalize_payload
from blockforge.packager import DatapackPackager, archive_filename


class DatapackForge:
    """Normalizes payloads, generates artifacts and packages them."""

    def __init__(self, config: Optional[DatapackConfig] = None):
        self.config = config or DatapackConfig()
        self.packager = DatapackPackager(self.config)

    def preview(self, raw: Any) -> DatapackArtifacts:
        """Generate the artifacts for a payload without packaging them."""
        config, namespace = normalize_payload(raw)
        return build_artifacts(config, namespace, self.config.pack_format)

    def generate(self, raw: Any) -> Tuple[str, bytes]:
        """Generate the datapack archive for a payload.

        Returns the archive filename and its bytes.
        """
        artifacts = self.preview(raw)
        logger.info(f"Generating datapack for namespace {artifacts.namespace}")
        return archive_filename(artifacts.namespace), self.packager.package(artifacts)
