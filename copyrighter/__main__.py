# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from .cli_main import main

if __name__ == "__main__":
    raise SystemExit(main())
