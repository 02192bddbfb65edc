# ABOUTME: Canned Google Books API response fixtures for testing.
# ABOUTME: Provides realistic JSON dicts matching the volumes search and volume detail shapes.

SEARCH_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 412,
    "items": [
        {
            "kind": "books#volume",
            "id": "dune-messiah",
            "volumeInfo": {
                "title": "Dune Messiah",
                "authors": ["Frank Herbert"],
                "publishedDate": "1969",
            },
        },
        {
            "kind": "books#volume",
            "id": "abc",
            "volumeInfo": {
                "title": "Dune",
                "authors": ["Frank Herbert"],
                "publishedDate": "1965-08-01",
            },
        },
        {
            "kind": "books#volume",
            "id": "dune-2005",
            "volumeInfo": {
                "title": "Dune",
                "authors": ["Frank Herbert"],
                "publishedDate": "2005-08-02",
            },
        },
    ],
}

SEARCH_RESPONSE_EMPTY = {
    "kind": "books#volumes",
    "totalItems": 0,
}

SEARCH_RESPONSE_PARTIAL_ITEMS = {
    "kind": "books#volumes",
    "totalItems": 3,
    "items": [
        {"kind": "books#volume", "volumeInfo": {"title": "No Id Here"}},
        {"kind": "books#volume", "id": "bare"},
        {
            "kind": "books#volume",
            "id": "ok",
            "volumeInfo": {"title": "Complete", "publishedDate": "2001"},
        },
    ],
}

VOLUME_RESPONSE = {
    "kind": "books#volume",
    "id": "abc",
    "volumeInfo": {
        "title": "Dune",
        "authors": ["Frank Herbert"],
        "publisher": "Chilton Books",
        "publishedDate": "1965-08-01",
        "description": "Set on the desert planet Arrakis.",
        "mainCategory": "Fiction",
        "categories": ["Fiction / Science Fiction / General", "Science fiction"],
        "averageRating": 4.0,
        "ratingsCount": 3024,
        "imageLinks": {
            "smallThumbnail": "http://books.google.com/books/content?id=abc&zoom=5",
            "thumbnail": "http://books.google.com/books/content?id=abc&zoom=1",
        },
    },
}

VOLUME_RESPONSE_SPARSE = {
    "kind": "books#volume",
    "id": "sparse",
    "volumeInfo": {
        "title": "Untitled Manuscript",
        "publishedDate": "circa 1850",
    },
}

VOLUME_RESPONSE_NO_ID = {
    "error": {"code": 404, "message": "The volume ID could not be found."},
}
