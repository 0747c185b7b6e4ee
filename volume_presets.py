from __future__ import annotations

from typing import List, Sequence, Tuple

DEFAULT_VOLUME_PRESETS: Tuple[int, ...] = (5, 10, 15, 20, 25)


def compute_volume_presets(defaults: Sequence[int], new_preset: int) -> List[int]:
    """
    defaults のコピーを返す。new_preset が 0 以上なら末尾に追加する。
    defaults 自体は変更しない。
    """
    presets = list(defaults)
    if new_preset >= 0:
        presets.append(new_preset)
    return presets


def get_updated_volume_presets(new_preset: int) -> List[int]:
    return compute_volume_presets(DEFAULT_VOLUME_PRESETS, new_preset)
