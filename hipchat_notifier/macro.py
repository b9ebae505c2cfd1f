"""
Macro Expansion

Substitutes ${NAME} tokens in a message template with values taken from
the completed build. Unknown tokens are left as they are.
"""

import re
from typing import Dict, Optional

from .types import BuildContext

# Match ${VAR_NAME} in a template
MACRO_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def build_variables(ctx: BuildContext) -> Dict[str, str]:
    """
    Collect the macro values for a build.

    Build environment variables are included, but the built-in names
    always take precedence over them.
    """
    variables = {str(k): str(v) for k, v in ctx.env.items()}
    variables.update({
        "JOB_NAME": ctx.job_name,
        "BUILD_NUMBER": str(ctx.build_number),
        "BUILD_ID": str(ctx.build_number),
        "BUILD_RESULT": str(ctx.result),
        "BUILD_URL": ctx.url,
        "WORKSPACE": str(ctx.workspace),
    })
    return variables


def expand(template: Optional[str], ctx: BuildContext) -> str:
    """Expand all recognized macros in template. Never raises."""
    if not template:
        return ""

    variables = build_variables(ctx)

    def repl(match: re.Match) -> str:
        return variables.get(match.group(1), match.group(0))

    return MACRO_RE.sub(repl, template)
