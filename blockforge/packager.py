"""Bundle generated artifacts into a datapack zip archive."""

import io
import json
import re
import zipfile
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from blockforge.config.settings import DatapackConfig
from blockforge.errors import PackagingError
from blockforge.models.schemas import DatapackArtifacts

_NAMESPACE_PATTERN = re.compile(r"^[a-z0-9_]+$")


def archive_filename(namespace: str) -> str:
    return f"{namespace}-datapack.zip"


def _json_document(data) -> str:
    return f"{json.dumps(data, indent=2, ensure_ascii=False)}\n"


class DatapackPackager:
    """Lays out datapack files and writes them into a zip archive."""

    def __init__(self, config: Optional[DatapackConfig] = None):
        self.config = config or DatapackConfig()

    @staticmethod
    def build_file_tree(artifacts: DatapackArtifacts) -> Dict[str, str]:
        """Map archive paths to file contents."""
        namespace = artifacts.namespace
        if not _NAMESPACE_PATTERN.match(namespace):
            raise PackagingError(f"Unable to create namespace directory for {namespace!r}")

        functions_dir = f"data/{namespace}/functions"
        return {
            "pack.mcmeta": _json_document(artifacts.pack_meta),
            f"{functions_dir}/give_item.mcfunction": f"{artifacts.give_command}\n",
            f"{functions_dir}/ability.mcfunction": f"{artifacts.ability_function}\n",
            f"{functions_dir}/load.mcfunction": f"{artifacts.load_function}\n",
            "data/minecraft/tags/functions/load.json": _json_document(
                {"values": [f"{namespace}:load"]}
            ),
        }

    @staticmethod
    def _directories(paths) -> list:
        directories = []
        for path in paths:
            parts = path.split("/")[:-1]
            for depth in range(1, len(parts) + 1):
                directory = "/".join(parts[:depth]) + "/"
                if directory not in directories:
                    directories.append(directory)
        return directories

    def package(self, artifacts: DatapackArtifacts) -> bytes:
        """Build the datapack archive in memory."""
        files = self.build_file_tree(artifacts)
        buffer = io.BytesIO()

        try:
            with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                for directory in self._directories(files):
                    archive.writestr(directory, "")
                for path, content in files.items():
                    archive.writestr(path, content.encode("utf-8"))
        except (OSError, ValueError, zipfile.BadZipFile) as exc:
            raise PackagingError(f"Unable to write datapack archive: {exc}") from exc

        data = buffer.getvalue()
        logger.info(f"Packaged datapack {archive_filename(artifacts.namespace)} ({len(data)} bytes)")
        return data

    def write_to(self, artifacts: DatapackArtifacts, output_dir: Optional[Path] = None) -> Path:
        """Write the archive to disk and return its path."""
        output_dir = Path(output_dir or self.config.output_dir)
        output_path = output_dir / archive_filename(artifacts.namespace)
        data = self.package(artifacts)

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as exc:
            raise PackagingError(f"Unable to write {output_path}: {exc}") from exc

        logger.info(f"Saved datapack to {output_path}")
        return output_path
