# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from userauth.app import create_app


def main() -> None:
    app = create_app()
    app.run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        debug=os.getenv("FLASK_DEBUG") == "1",
    )


if __name__ == "__main__":
    main()
