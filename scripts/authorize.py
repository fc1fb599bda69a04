"""Authorize / deauthorize this app with Instagram from the terminal.

Modes:
  --mode authorize   : print the authorization URL, then exchange the code from
                       the pasted redirect URL (its state must match)
  --mode deauthorize : drop the stored token
  --mode status      : report whether a token is stored

Use --store redis so the token outlives the process (see REDIS_URL).

Usage:
  python scripts/authorize.py --mode authorize --store redis
"""
import sys
import argparse
import logging
from pathlib import Path
from urllib.parse import parse_qs, urlsplit
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

load_dotenv()

from config.settings import validate_keys
from instasheets.actions.catalog import EndpointCatalog
from instasheets.actions.factory import build_store, create_auth_service
from instasheets.actions.runner import ActionRunner
from instasheets.tools.http.client import HttpJsonClient
from instasheets.tools.http.paginator import Paginator
from instasheets.tools.sheet.adapters.in_memory_sheet import InMemorySheet
from instasheets.tools.ui.adapters.console_ui import ConsoleUI


def main():
    p = argparse.ArgumentParser()
    p.add_argument('--mode', choices=['authorize', 'deauthorize', 'status'], default='status')
    p.add_argument('--store', choices=['memory', 'redis'], default='redis')
    p.add_argument('--verbose', action='store_true')
    args = p.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    missing = validate_keys()
    if missing and args.mode == 'authorize':
        print('Missing env vars:', ', '.join(missing))
        raise SystemExit(1)

    ui = ConsoleUI()
    auth = create_auth_service(store=build_store(args.store))
    catalog = EndpointCatalog(Paginator(HttpJsonClient()), auth)
    runner = ActionRunner(catalog, ui, InMemorySheet(), auth=auth)

    if args.mode == 'status':
        print('authorized' if auth.has_access() else 'not authorized')
    elif args.mode == 'deauthorize':
        runner.deauthorize()
    else:
        runner.authorize()
        if auth.has_access():
            return
        redirect = ui.prompt('Paste the full URL you were redirected to:')
        if not redirect:
            print('cancelled')
            raise SystemExit(1)
        qs = parse_qs(urlsplit(redirect.strip()).query)
        code = (qs.get('code') or [''])[0]
        state = (qs.get('state') or [None])[0]
        if not code or not runner.complete_authorization(code, state):
            raise SystemExit(1)


if __name__ == '__main__':
    main()
