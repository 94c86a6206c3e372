import json
import os
from typing import List

import aiofiles

from ..models.instance import Instance
from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    DEFAULT_FILENAME = "kepler-instances.json"

    async def export(self, instances: List[Instance], path: str | None = None) -> str:
        out_path = path or self.DEFAULT_FILENAME
        rows = [instance.model_dump(mode="json") for instance in instances or []]
        # Ensure parent directory exists
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        # Write to a sibling file first so readers never see a half-written snapshot
        tmp_path = f"{out_path}.tmp"
        try:
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as fh:
                await fh.write(json.dumps(rows, ensure_ascii=False, indent=2))
            os.replace(tmp_path, out_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        return out_path
