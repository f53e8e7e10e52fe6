"""Generates the batch directories the benchmark reads"""

import argparse
import random
import shutil
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .batches import BATCH_DEFINITIONS
from .config import DEFAULT_BATCHES_ROOT


WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua enim ad minim veniam quis nostrud "
    "exercitation ullamco laboris nisi aliquip ex ea commodo consequat duis aute irure "
    "in reprehenderit voluptate velit esse cillum fugiat nulla pariatur excepteur sint "
    "occaecat cupidatat non proident sunt culpa qui officia deserunt mollit anim id est laborum"
).split()

MIXED_PARAGRAPHS = (1, 50)
SENTENCES_PER_PARAGRAPH = (3, 8)
WORDS_PER_SENTENCE = (6, 18)

# directory -> (file count, paragraphs per file or None for mixed)
BATCH_LAYOUT: Dict[str, Tuple[int, Optional[int]]] = {
    "75-mixed": (75, None),
    "150-mixed": (150, None),
    "300-mixed": (300, None),
    "100x-5-paragraph": (100, 5),
    "100x-10-paragraph": (100, 10),
    "100x-20-paragraph": (100, 20),
    "100x-50-paragraph": (100, 50),
}


def make_sentence(rng: random.Random) -> str:
    words = [rng.choice(WORDS) for _ in range(rng.randint(*WORDS_PER_SENTENCE))]
    return " ".join(words).capitalize() + "."


def make_paragraph(rng: random.Random) -> str:
    return " ".join(make_sentence(rng) for _ in range(rng.randint(*SENTENCES_PER_PARAGRAPH)))


def make_document(rng: random.Random, paragraphs: int) -> str:
    return "\n\n".join(make_paragraph(rng) for _ in range(paragraphs)) + "\n"


def generate_batch(directory: Path, count: int, paragraphs: int = None,
                   rng: random.Random = None) -> List[Path]:
    """Create count text files in directory, replacing whatever was there"""
    rng = rng or random.Random(42)

    if directory.exists():
        shutil.rmtree(directory)
    directory.mkdir(parents=True)

    files = []
    for i in range(count):
        n = paragraphs or rng.randint(*MIXED_PARAGRAPHS)
        path = directory / f"file-{i:04d}-{n}p.txt"
        path.write_text(make_document(rng, n), encoding="utf-8")
        files.append(path)
    return files


def generate_batches(root: Path, seed: int = 42) -> Dict[str, int]:
    """Create all predefined batch directories under root"""
    root = Path(root)
    if root.resolve() in (Path("/").resolve(), Path.home().resolve()):
        raise ValueError("Batches root is too dangerous to overwrite")

    rng = random.Random(seed)
    created = {}
    for name, dirname in BATCH_DEFINITIONS:
        count, paragraphs = BATCH_LAYOUT[dirname]
        files = generate_batch(root / dirname, count, paragraphs, rng)
        created[name] = len(files)
        print(f"Created {len(files)} files in {root / dirname}")
    return created


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="writebench-generate",
        description="Generate the text batches used by writebench",
    )
    parser.add_argument('--root', type=Path, default=DEFAULT_BATCHES_ROOT,
                        help='Directory to create the batches in')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed for the generated text')
    args = parser.parse_args(argv)

    generate_batches(args.root, seed=args.seed)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
