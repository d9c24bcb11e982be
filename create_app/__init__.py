"""create-app -- scaffolds a new JavaScript app from a bundled template.

Quick usage::

    from create_app import Pipeline, RunConfig

    config = RunConfig.create("my-app", use_yarn=False)
    exit_code = await Pipeline(config).run()
"""

__version__ = "1.0.0"

from create_app.config import RunConfig  # noqa: E402
from create_app.pipeline import Pipeline, main  # noqa: E402

__all__ = [
    "Pipeline",
    "RunConfig",
    "__version__",
    "main",
]
