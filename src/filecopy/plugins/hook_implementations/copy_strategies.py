from filecopy.engine import BufferedCopy, CopyStrategy, MmapCopy
from filecopy.plugins import plugin


@plugin(name="filecopy")
def installable_copy_strategies() -> list[type[CopyStrategy]]:
    return [BufferedCopy, MmapCopy]
