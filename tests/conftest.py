"""Global test fixtures."""

import os

# Keep the content store off the user's home directory.
# This must happen at module load time, before any Config is built.
os.environ.setdefault("RECAST_DATABASE__URL", "sqlite+aiosqlite:///:memory:")
