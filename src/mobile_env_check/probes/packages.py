from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class AndroidPackage:
    """One row of ``sdkmanager --list_installed``."""
    path: str
    version: str
    description: str
    location: str

    @property
    def _segments(self) -> List[str]:
        return self.path.split(";")

    @property
    def is_platform(self) -> bool:
        return self._segments[0] == "platforms"

    @property
    def is_system_image(self) -> bool:
        return self._segments[0] == "system-images"

    @property
    def platform_api(self) -> Optional[str]:
        # platforms;android-30 and system-images;android-30;google_apis;x86_64
        segs = self._segments
        if len(segs) >= 2 and segs[1].startswith("android-"):
            return segs[1][len("android-"):]
        return None

    @property
    def image_tag(self) -> Optional[str]:
        segs = self._segments
        return segs[2] if self.is_system_image and len(segs) >= 3 else None

    @property
    def image_abi(self) -> Optional[str]:
        segs = self._segments
        return segs[3] if self.is_system_image and len(segs) >= 4 else None

    def api_number(self) -> Optional[int]:
        api = self.platform_api
        return int(api) if api is not None and api.isdigit() else None


def parse_installed_packages(text: str) -> List[AndroidPackage]:
    """Parse the package table printed by ``sdkmanager --list_installed``.

    Only the first table (installed packages) is read; parsing stops at an
    "Available Packages" or "Available Updates" heading.
    """
    packages: List[AndroidPackage] = []
    in_table = False
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("Available"):
            break
        if "|" not in stripped:
            continue
        cells = [c.strip() for c in stripped.split("|")]
        if cells[0] == "Path":
            in_table = True
            continue
        if not in_table or cells[0].startswith("-"):
            continue
        while len(cells) < 4:
            cells.append("")
        packages.append(AndroidPackage(path=cells[0], version=cells[1], description=cells[2], location=cells[3]))
    return packages
