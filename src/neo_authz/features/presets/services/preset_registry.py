"""Preset registry holding the built-in and custom presets by key."""

from typing import Dict, List

from ....config.constants import CATEGORY_NAMES, PermissionCategory
from ....core.exceptions import PresetError, PresetNotFoundError
from ..entities import Preset, category_filter, code_filter

# Additive per-category presets, in picker order
CATEGORY_PRESET_ORDER = (
    PermissionCategory.DEVICE,
    PermissionCategory.INFRA,
    PermissionCategory.BACKUP,
    PermissionCategory.SERVICE,
    PermissionCategory.DATABASE,
)

_CATEGORY_PRESET_DESCRIPTIONS: Dict[PermissionCategory, str] = {
    PermissionCategory.DEVICE: "장비 생성/수정/삭제",
    PermissionCategory.INFRA: "K8s/Docker/Podman 관리",
    PermissionCategory.BACKUP: "백업 생성/복구/다운로드",
    PermissionCategory.SERVICE: "서비스 빌드/배포/운영",
    PermissionCategory.DATABASE: "DB 연결/동기화/마이그레이션",
}


def build_category_preset(category: PermissionCategory) -> Preset:
    """Additive preset toggling every visible code of one category."""
    return Preset(
        key=category.value,
        filter=category_filter(category),
        additive=True,
        label=CATEGORY_NAMES[category],
        description=_CATEGORY_PRESET_DESCRIPTIONS[category],
        category=category,
    )


CLEAR_ALL_PRESET = Preset(
    key="clear",
    filter=lambda definition: False,
    additive=False,
    label="전체 해제",
    description="모든 권한 해제",
)


def _builtin_presets() -> List[Preset]:
    presets = [
        Preset(
            key="admin",
            filter=lambda definition: True,
            additive=False,
            label="전체 권한",
            description="모든 권한 부여",
        ),
    ]
    presets.extend(build_category_preset(category) for category in CATEGORY_PRESET_ORDER)
    presets.extend([
        Preset(
            key="viewer",
            filter=code_filter(suffixes=(":view",)),
            label="조회 전용",
            description="모든 리소스 조회만 가능",
        ),
        Preset(
            key="read-update",
            filter=code_filter(suffixes=(":view", ":update"), contains=(":create",)),
            label="조회 + 수정",
            description="조회 및 수정 권한 (삭제/실행 제외)",
        ),
        Preset(
            key="operator",
            filter=code_filter(suffixes=(":view",), contains=(":restart", ":logs", ":test")),
            label="운영자",
            description="조회 + 운영 권한 (로그, 재시작 등)",
        ),
        Preset(
            key="developer",
            filter=category_filter(PermissionCategory.SERVICE, PermissionCategory.DATABASE),
            label="개발자",
            description="서비스 + DB 관리 (빌드/배포/보안스캔)",
        ),
    ])
    return presets


class PresetRegistry:
    """Registry of presets keyed by preset key, in registration order."""

    def __init__(self):
        self._presets: Dict[str, Preset] = {}

    @classmethod
    def default(cls) -> "PresetRegistry":
        """Registry holding the built-in presets."""
        registry = cls()
        for preset in _builtin_presets():
            registry.register(preset)
        return registry

    def register(self, preset: Preset, replace: bool = False) -> None:
        """
        Register a preset.

        Raises:
            PresetError: If the key is taken and ``replace`` is False
        """
        if preset.key in self._presets and not replace:
            raise PresetError(
                f"Preset already registered: {preset.key}",
                details={"key": preset.key},
            )
        self._presets[preset.key] = preset

    def get(self, key: str) -> Preset:
        """
        Get a preset by key.

        Raises:
            PresetNotFoundError: If no preset has this key
        """
        preset = self._presets.get(key)
        if preset is None:
            raise PresetNotFoundError(
                f"Unknown preset: {key}",
                details={"key": key, "available": self.keys()},
            )
        return preset

    def keys(self) -> List[str]:
        return list(self._presets)

    def list(self) -> List[Preset]:
        return list(self._presets.values())

    def additive_presets(self) -> List[Preset]:
        return [preset for preset in self._presets.values() if preset.additive]

    def replace_presets(self) -> List[Preset]:
        return [preset for preset in self._presets.values() if not preset.additive]

    def __contains__(self, key: object) -> bool:
        return key in self._presets

    def __len__(self) -> int:
        return len(self._presets)
