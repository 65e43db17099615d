"""Run the HTTP service under uvicorn (``basicstats-serve``)."""
from __future__ import annotations

import uvicorn

from basicstats.config import HOST, PORT


def main() -> None:
    # Logging is configured by create_app(); keep uvicorn from installing its own
    uvicorn.run("basicstats.main:app", host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
