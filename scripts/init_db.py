#!/usr/bin/env python3
"""Provision the remote database schema from supabase/init.sql."""

import sys

from wedding.interface.cli.init_db import main

if __name__ == "__main__":
    sys.exit(main())
