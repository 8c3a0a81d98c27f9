"""
Download past answers and write them as a candidate list.

Usage:
    python -m script.fetch_words --out wordtree/datasets/data/solutions_5.txt
    # or alphabetically sorted:
    python -m script.fetch_words --sort --out wordtree/datasets/data/solutions_5.txt
"""

import argparse

from wordtree.datasets import save_words
from wordtree.datasets.fetch import URL, fetch_answers


def main():
    ap = argparse.ArgumentParser(description="Fetch a candidate word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordtree/datasets/data/solutions_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    path = save_words(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {path}")


if __name__ == "__main__":
    main()
