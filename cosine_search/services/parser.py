from collections import defaultdict
from typing import Dict, List, Set

from cosine_search.schemas.query import QueryInput


def parse_queries_file(content: str) -> Dict[int, str]:
    """Parse queries file with .I, .T, .A, .W format"""
    queries = {}
    current_id = None
    current_field = None
    title_content = ""
    article_content = ""

    for line in content.strip().split("\n"):
        line = line.strip()
        if not line:
            continue

        if line.startswith(".I "):
            if current_id is not None:
                combined_query = (title_content + " " + article_content).strip()
                if combined_query:
                    queries[current_id] = combined_query

            current_id = int(line[3:].strip())
            title_content = ""
            article_content = ""
            current_field = None

        elif line.startswith(".T"):
            current_field = "title"

        elif line.startswith(".W"):
            current_field = "article"

        elif line.startswith("."):
            # .A and other sections are not part of the query text
            current_field = None

        elif current_field and current_id is not None:
            if current_field == "title":
                title_content = f"{title_content} {line}" if title_content else line
            else:
                article_content = f"{article_content} {line}" if article_content else line

    if current_id is not None:
        combined_query = (title_content + " " + article_content).strip()
        if combined_query:
            queries[current_id] = combined_query

    return queries


def parse_relevance_file(content: str) -> Dict[int, Set[int]]:
    """Parse relevance file format: query_id doc_id 0 0"""
    relevance = defaultdict(set)

    for line in content.strip().split("\n"):
        parts = line.split()
        if len(parts) >= 2:
            relevance[int(parts[0])].add(int(parts[1]))

    return dict(relevance)


def query_input(
    parsed_queries: Dict[int, str],
    parsed_relevance: Dict[int, Set[int]]
) -> List[QueryInput]:
    """
    Convert parsed inputs into structured query input list

    Args:
        parsed_queries: Dict mapping query_id to query_text
        parsed_relevance: Dict mapping query_id to set of relevant doc_ids

    Returns:
        List of QueryInput objects ready for batch processing
    """
    return [
        QueryInput(
            query_id=query_id,
            query_text=query_text,
            relevant_docs=parsed_relevance.get(query_id, set())
        )
        for query_id, query_text in parsed_queries.items()
        if query_text.strip()
    ]
