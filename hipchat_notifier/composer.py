"""
Message Composer

Produces the notification body, either from a file in the build workspace
or by expanding the success/failure template.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import FromFile, NotifierConfig
from .macro import expand
from .policy import select_template
from .types import BuildContext, BuildLog

logger = logging.getLogger(__name__)


def read_message_file(source: FromFile, workspace: Path) -> str:
    """
    Read a message file relative to the workspace.

    Lines are concatenated with their line terminators removed.

    Args:
        source: File message source
        workspace: Build workspace root

    Returns:
        File content as a single line ("" when no path is configured)

    Raises:
        OSError: If the file cannot be read or lies outside the workspace
        ValueError: If the path is invalid or the file is not valid UTF-8
    """
    if source.relative_path is None:
        return ""

    # Joined as text so an absolute path still lands under the workspace
    path = Path(f"{workspace}/{source.relative_path}")
    root = Path(workspace).resolve()
    if root not in path.resolve().parents:
        raise PermissionError(f"Message file is outside the workspace: {source.relative_path}")

    with open(path, encoding="utf-8") as f:
        return "".join(line.rstrip("\n") for line in f)


def compose(
    config: NotifierConfig,
    ctx: BuildContext,
    build_log: Optional[BuildLog] = None,
) -> str:
    """
    Compose the message body for a build.

    A file source that cannot be read falls back to the template; the
    error message goes to the build log.
    """
    source = config.message_source
    if isinstance(source, FromFile):
        try:
            return read_message_file(source, ctx.workspace)
        except (OSError, ValueError) as e:
            if build_log is not None:
                build_log.println(str(e))
            else:
                logger.warning("Failed to read message file %s: %s", source.relative_path, e)

    return expand(select_template(ctx.result, config), ctx)
