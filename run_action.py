"""Minimal runner for Instagram actions.

Usage: python run_action.py --action users_self_media_recent --answers '["10"]'

Prompts are read from the terminal unless --answers supplies them as a JSON
list (null cancels a prompt). Written rows are printed as two tab separated
columns, or as JSON with --json.
"""
import argparse
import json
import logging
import os

from instasheets.actions.factory import build_store, create_runner
from instasheets.config import api_config
from instasheets.tools.sheet.adapters.in_memory_sheet import InMemorySheet
from instasheets.tools.sheet.interface import Cursor
from instasheets.tools.ui.adapters.scripted_ui import ScriptedUI

parser = argparse.ArgumentParser(description='Pull Instagram API resources into two-column rows')
group = parser.add_mutually_exclusive_group(required=True)
group.add_argument('--action', help='Action name (see --list)')
group.add_argument('--list', action='store_true', help='List available actions grouped by menu section')
parser.add_argument('--answers', help='JSON list of prompt answers; null cancels a prompt', default=None)
parser.add_argument('--row', type=int, default=1, help='1-based destination row')
parser.add_argument('--column', type=int, default=1, help='1-based destination column')
parser.add_argument('--store', choices=['memory', 'redis'], default=os.getenv('INSTASHEETS_STORE', 'memory'))
parser.add_argument('--token', help='Seed the token store with this access token', default=os.getenv('INSTAGRAM_ACCESS_TOKEN'))
parser.add_argument('--json', action='store_true', help='Emit rows and result as JSON')
parser.add_argument('--verbose', action='store_true', help='Log monitoring events to stderr')
args = parser.parse_args()

logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

ui = ScriptedUI(json.loads(args.answers)) if args.answers is not None else None
sheet = InMemorySheet()
store = build_store(args.store)
if args.token:
	store.set(api_config.TOKEN_KEY, json.dumps({'access_token': args.token}))
runner = create_runner(args.store, ui=ui, sink=sheet, store=store)

if args.list:
	for section, specs in runner.catalog.menu():
		print(f'{section}:')
		for spec in specs:
			print(f'  {spec.name:<36} {spec.label}')
else:
	start = Cursor(args.row, args.column)
	result = runner.run(args.action, start)
	rows = sheet.block(start, result.cursor) if result.cursor else []
	if ui is not None:
		for title, message in ui.alerts:
			print(f'[{title}] {message or ""}')
	if args.json:
		print(json.dumps({'result': result.to_dict(), 'rows': rows}, default=str, ensure_ascii=False, indent=2))
	else:
		for label, value in rows:
			print(f'{label}\t{value}')
		print(f'# {result.status}: {result.rows_written} rows from {result.pages} page(s)')
