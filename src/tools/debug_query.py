"""Debug json-query ranking: index stats, raw hits and grouped results for a file."""
import sys
sys.path.insert(0, 'src')

from json_explorer.json_loader import load_document
from json_explorer.search import build_inverted_index, query_index, finalize_grouping


def main(filepath: str, text: str, limit: int = 10):
    data = load_document(filepath)
    index = build_inverted_index(data)
    postings = sum(len(v) for v in index.values())
    print(f'Tokens indexed: {len(index)}  postings: {postings}')

    raw = query_index(index, text, limit * 5)
    print(f'\nRaw hits ({len(raw)}):')
    for r in raw:
        print(f'  {r.score:7.3f}  {r.path}')

    grouped = finalize_grouping(raw, limit)
    print(f'\nGrouped ({len(grouped)}):')
    for r in grouped:
        print(f'  {r.score:7.3f}  {r.path}')


if __name__ == '__main__':
    if len(sys.argv) < 3:
        print('Usage: python src/tools/debug_query.py <file.json> <query> [limit]')
        sys.exit(1)
    main(sys.argv[1], sys.argv[2], int(sys.argv[3]) if len(sys.argv) > 3 else 10)
