"""Package entry point for ``python -m yt_subtitles``.

WHY: Users run ``python -m yt_subtitles <url>`` to save subtitle files, or
``python -m yt_subtitles --serve`` to start the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
uvicorn server. Otherwise, delegates to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from yt_subtitles.server.app import run_api
        run_api()
    else:
        from yt_subtitles.cli import main
        main()
