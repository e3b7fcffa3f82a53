#!/usr/bin/env python3
"""
Reusing one fetcher under unrelated roots.

fetch_progress only reads an ``id`` from its input, so the same function
decorates both series and movies:

    series      movie
       \\         /
        progress
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from hydratree import Node, declare_model


async def fetch_series(series_id):
    return {'id': series_id, 'name': 'name of the series', 'season_ids': ['1', '2', '3']}


async def fetch_movie(movie_id):
    return {'id': movie_id, 'name': 'name of the movie'}


async def fetch_progress(obj):
    return {'percentage_watched': f"{obj['id'] * 2}%"}


series_root = Node('series', fetch_series)
series_progress = Node('progress', fetch_progress, series_root)

movie_root = Node('movie', fetch_movie)
movie_progress = Node('progress', fetch_progress, movie_root)


async def main():
    series = await declare_model(series_root, series_progress).with_progress().compile(14)
    movie = await declare_model(movie_root, movie_progress).with_progress().compile(8)

    print(f"Series progress: {series.progress['percentage_watched']}")  # 28%
    print(f"Movie progress: {movie.progress['percentage_watched']}")    # 16%
    return series, movie


if __name__ == "__main__":
    asyncio.run(main())
