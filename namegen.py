#!/usr/bin/env python3
"""
Research Name Generator - namegen.py

Finds acronym-like names hidden in a project title:
- exact: dictionary words spelled by title letters, in order
- compound: two exact matches glued into a new (non-dictionary) word
- near: dictionary words a small edit away from the title initials

Ranked by "niceness". Examples:
    python namegen.py "Distributed Consensus Engine"
    python namegen.py "Cat Dog" --min-length 3 --no-near
    python namegen.py --interactive --dictionary-source wordfreq
    python namegen.py --titles-file titles.txt --workers 4 --save results.json
"""

from __future__ import annotations
import argparse
import json
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Sequence, Tuple

from tqdm import tqdm

from highlight import format_match
from matching import (
    DEFAULT_MAX_RESULTS, DEFAULT_MIN_LENGTH, SearchOptions, SearchResults,
    build_word_set, search,
)
from near_matches import DEFAULT_MAX_EDIT_DISTANCE
from titles import analyze_title
from wordlist import DEFAULT_WORDLIST, N_WORDS, filter_by_zipf, get_zipf, load_words, load_wordfreq_words

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

DEFAULT_TOP = 20

EMPTY_MESSAGES = {
    "exact": "No exact matches found. Try a longer title or lower minimum length.",
    "compound": "No compound words found.",
    "near": "No near matches found for the initials.",
}


def progress(iterable, desc=""):
    return tqdm(iterable, desc=desc, ascii=" ▖▘▝▗▚▞█", bar_format='{desc}: |{bar:20}|', leave=False)


# ============================================================================ #
#                              DICTIONARY                                      #
# ============================================================================ #

def load_dictionary(args: argparse.Namespace) -> List[str]:
    """Load the word list; a failed load leaves no words rather than exiting."""
    print("Loading dictionary...")
    try:
        if args.dictionary_source == "wordfreq":
            words = load_wordfreq_words(args.n_words)
        else:
            words = load_words(args.wordlist)
    except (FileNotFoundError, RuntimeError) as e:
        print(f"Failed to load word list: {e}")
        print("Continuing with an empty dictionary; no matches are possible.")
        return []

    if args.min_zipf > 0:
        words = filter_by_zipf(progress(words, desc="Zipf filter"), args.min_zipf)
        print(f"Common words (zipf>={args.min_zipf}): {len(words)}")
    print(f"Dictionary words: {len(words):,}")
    return words


# ============================================================================ #
#                              OUTPUT                                          #
# ============================================================================ #

def print_results(results: SearchResults, options: SearchOptions, top: int, *, show_zipf: bool = False) -> None:
    title_info = results.title_info
    if title_info.initials:
        print(f"Initials: {title_info.initials.upper()}")

    for category in ("exact", "compound", "near"):
        if category == "compound" and not options.include_compounds:
            continue
        if category == "near" and not options.include_near_matches:
            continue
        matches = getattr(results, category)

        noun = "match" if len(matches) == 1 else "matches"
        header = f"{len(matches)} {category} {noun}"
        if category == "exact" and len(matches) >= options.max_results:
            header += f" (limited to {options.max_results})"
        print(f"\n{'='*70}")
        print(header)
        print(f"{'='*70}")

        if not matches:
            print(EMPTY_MESSAGES[category])
            continue
        for i, match in enumerate(matches[:top]):
            line = format_match(match, title_info, i + 1, color=True)
            if show_zipf:
                line += f"  zipf={get_zipf(match.word):.1f}"
            print(line)
        if len(matches) > top:
            print(f"  ... {len(matches) - top} more")


def save_results(path: Path, all_results: Sequence[SearchResults]) -> None:
    payload = [r.to_dict() for r in all_results]
    with path.open("w", encoding="utf-8") as handle:
        json.dump({"results": payload}, handle, indent=2)
    print(f"Saved {sum(r.total for r in all_results)} matches to {path}")


# ============================================================================ #
#                              SEARCH                                          #
# ============================================================================ #

def run_search(title: str, words: Sequence[str], word_set: FrozenSet[str],
               options: SearchOptions, *, show_progress: bool = True) -> SearchResults:
    return search(
        analyze_title(title),
        words,
        options,
        word_set=word_set,
        progress=progress if show_progress else None,
    )


_worker_state: Tuple[Sequence[str], FrozenSet[str], SearchOptions] | None = None


def _init_worker(words: Sequence[str], options: SearchOptions) -> None:
    global _worker_state
    _worker_state = (words, build_word_set(words), options)


def _search_worker(title: str) -> SearchResults:
    words, word_set, options = _worker_state
    return run_search(title, words, word_set, options, show_progress=False)


def search_titles(titles: Iterable[str], words: Sequence[str], options: SearchOptions,
                  workers: int = 1) -> Iterator[SearchResults]:
    """Search many titles, one worker process each, results in input order."""
    titles = [t for t in titles if t.strip()]
    if workers <= 1 or len(titles) <= 1:
        word_set = build_word_set(words)
        for title in titles:
            yield run_search(title, words, word_set, options, show_progress=False)
        return

    with Pool(min(workers, len(titles)), initializer=_init_worker, initargs=(words, options)) as pool:
        yield from pool.imap(_search_worker, titles)


def interactive_loop(words: Sequence[str], word_set: FrozenSet[str], options: SearchOptions,
                     top: int, *, show_zipf: bool = False) -> List[SearchResults]:
    print("Enter a project title (blank line to quit):")
    history: List[SearchResults] = []
    while True:
        try:
            raw = input("title> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        title = raw.strip()
        if not title:
            break
        results = run_search(title, words, word_set, options)
        print_results(results, options, top, show_zipf=show_zipf)
        history.append(results)
    return history


# ============================================================================ #
#                              MAIN                                            #
# ============================================================================ #

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Find research project names hidden in a title')
    parser.add_argument('title', nargs='?', default=None, help='Project title')
    parser.add_argument('--min-length', type=int, default=DEFAULT_MIN_LENGTH, help='Min word length')
    parser.add_argument('--max-results', type=int, default=DEFAULT_MAX_RESULTS,
                        help='Max exact matches (compound/near get half)')
    parser.add_argument('--filter', dest='search_term', default='', help='Only words containing this text')
    parser.add_argument('--no-compounds', action='store_true', help='Skip compound words')
    parser.add_argument('--no-near', action='store_true', help='Skip near matches for the initials')
    parser.add_argument('--max-edit-distance', type=int, default=DEFAULT_MAX_EDIT_DISTANCE,
                        help='Max edits for near matches')
    parser.add_argument('--dictionary-source', choices=('file', 'wordfreq'), default='file',
                        help='Flat word list file or wordfreq top-N list')
    parser.add_argument('--wordlist', type=Path, default=DEFAULT_WORDLIST, help='Word list, one per line')
    parser.add_argument('--n-words', type=int, default=N_WORDS, help='Words to take from wordfreq')
    parser.add_argument('--min-zipf', type=float, default=0.0, help='Drop words rarer than this zipf freq')
    parser.add_argument('--show-zipf', action='store_true', help='Print zipf frequency next to each word')
    parser.add_argument('--top', type=int, default=DEFAULT_TOP, help='Lines to print per category')
    parser.add_argument('--interactive', action='store_true', help='Prompt for titles')
    parser.add_argument('--titles-file', type=Path, default=None, help='Search every title in this file')
    parser.add_argument('--workers', type=int, default=cpu_count(), help='Processes for --titles-file')
    parser.add_argument('--save', type=Path, default=None, help='Save results as JSON')
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.title and not args.interactive and args.titles_file is None:
        parser.error("give a title, --interactive or --titles-file")

    try:
        options = SearchOptions(
            min_length=args.min_length,
            max_results=args.max_results,
            search_term=args.search_term,
            include_compounds=not args.no_compounds,
            include_near_matches=not args.no_near,
            max_edit_distance=args.max_edit_distance,
        )
    except ValueError as e:
        parser.error(str(e))

    words = load_dictionary(args)
    word_set = build_word_set(words)
    all_results: List[SearchResults] = []

    if args.title:
        results = run_search(args.title, words, word_set, options)
        print_results(results, options, args.top, show_zipf=args.show_zipf)
        all_results.append(results)

    if args.titles_file is not None:
        if not args.titles_file.exists():
            print(f"Titles file not found: {args.titles_file}")
        else:
            titles = args.titles_file.read_text(encoding="utf-8").splitlines()
            print(f"Searching {len(titles)} titles with {args.workers} workers...")
            for results in search_titles(titles, words, options, args.workers):
                print(f"\n{'#'*70}\n{results.title_info.original}\n{'#'*70}")
                print_results(results, options, args.top, show_zipf=args.show_zipf)
                all_results.append(results)

    if args.interactive:
        all_results.extend(
            interactive_loop(words, word_set, options, args.top, show_zipf=args.show_zipf)
        )

    if args.save and all_results:
        save_results(args.save, all_results)


if __name__ == "__main__":
    main()
