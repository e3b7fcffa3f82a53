#!/usr/bin/env python3
"""
Splitting a monolithic movie fetcher into a hydration tree.

This example demonstrates:
- A single-node tree that fetches everything at once
- Splitting personalized progress data into its own optional node
- Re-rooting under an id node so movie and progress fetch in parallel
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from hydratree import Node, declare_model


# Stand-ins for the services a real movie model is aggregated from

async def fetch_metadata(movie_id):
    await asyncio.sleep(0)
    return {'title': 'Movie title', 'rating': 4.5}


async def fetch_images(movie_id):
    await asyncio.sleep(0)
    return [{'src': 'https://example.com/image.jpg'}]


async def fetch_full_movie(movie_id):
    """Fetch metadata, images and progress in one go."""
    metadata, images = await asyncio.gather(
        fetch_metadata(movie_id), fetch_images(movie_id)
    )
    return {'id': movie_id, 'metadata': metadata, 'images': images, 'progress': {'watched': 0.5}}


async def fetch_movie(movie_id):
    """Fetch everything except progress."""
    metadata, images = await asyncio.gather(
        fetch_metadata(movie_id), fetch_images(movie_id)
    )
    return {'id': movie_id, **metadata, 'images': images}


async def fetch_progress(obj):
    """Progress only needs an id, whatever the object is."""
    return {'watched': f"{obj['id'] * 2}%"}


async def id_only(movie_id):
    return {'id': movie_id}


# Step 1: one node holding the whole domain model

full_movie_root = Node('movie', fetch_full_movie)


async def full_movie():
    builder = declare_model(full_movie_root)
    return await builder.compile(1)


# Step 2: progress split off into an optional child
#
#   movie
#     |
#   progress

movie_root = Node('movie', fetch_movie)
progress_node = Node('progress', fetch_progress, movie_root)


async def movie_with_optional_progress():
    builder = declare_model(movie_root, progress_node)

    without_progress = await builder.compile(5)
    with_progress = await builder.with_progress().compile(10)
    return without_progress, with_progress


# Step 3: progress doesn't depend on the movie request, so both hang off
# an id root and run in the same layer
#
#         id
#       /    \
#   metadata  progress

parallel_root = Node('id', id_only)
parallel_metadata = Node('metadata', lambda obj: fetch_movie(obj['id']), parallel_root)
parallel_progress = Node('progress', fetch_progress, parallel_root)


async def parallel_movie():
    builder = declare_model(parallel_root, parallel_metadata, parallel_progress)

    only_progress = await builder.with_progress().compile(5)
    # Selection is sticky: this compile fetches progress too
    full = await builder.with_metadata().compile(15)
    return only_progress, full


async def main():
    movie = await full_movie()
    print(f"Full movie: {movie}")

    without_progress, with_progress = await movie_with_optional_progress()
    print(f"Without progress: {sorted(without_progress)}")
    print(f"With progress: {with_progress.progress['watched']}")

    only_progress, full = await parallel_movie()
    print(f"Only progress: {only_progress.progress['watched']}")
    print(f"Full: rating {full.metadata['rating']}, watched {full.progress['watched']}")


if __name__ == "__main__":
    print("HydraTree - Movie Model Example")
    print("=" * 50)
    asyncio.run(main())
