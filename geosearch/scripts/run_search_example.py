"""Quick script to run a few Hebrew queries against the bundled sample data.

Usage (from repo root, with venv active):
  python -m geosearch.scripts.run_search_example
"""
from __future__ import annotations
from pathlib import Path

from geosearch.src.pipeline.loaders import load_items, load_regions
from geosearch.src.pipeline.search_engine import SearchEngine

DATA = Path(__file__).parent.parent / 'data'
EXAMPLE_QUERIES = [("תל אביב", "all"), ("קריית גת", "all"), ("מרכז", "all"), ("", "family")]

def main():
    engine = SearchEngine(load_items(str(DATA / 'sample_items.json')), load_regions(str(DATA / 'sample_regions.json')))
    for query, filter_type in EXAMPLE_QUERIES:
        results = engine.search(query, filter_type)
        print(f"{query or '<empty>'} [{filter_type}] -> {len(results)} results")
        for rec in results:
            print(f"  {rec['name']} ({rec['location']})")

if __name__ == '__main__':
    main()
