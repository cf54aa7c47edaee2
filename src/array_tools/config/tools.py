# Store for tools configuration
TOOLS = [
    {
        "id": "jwt-decoder",
        "name": "JWT Decoder",
        "description": "Decode JSON Web Tokens and list the common header and payload claims",
        "endpoint": "/api/jwt/decode",
        "tags": ["jwt", "decoder", "token", "json", "auth"],
        "download_name": None,
        "icon": "🔐"
    },
    {
        "id": "string-converter",
        "name": "String Array Converter",
        "description": "Turn every line of a text file into an element of a quoted string array",
        "endpoint": "/api/string-converter/convert",
        "tags": ["string", "array", "converter", "lines"],
        "download_name": "output.txt",
        "icon": "🔤"
    },
    {
        "id": "array-merger",
        "name": "Array Merger",
        "description": "Merge two arrays, optionally removing duplicate items",
        "endpoint": "/api/arrays/merge",
        "tags": ["array", "merge", "union", "dedupe"],
        "download_name": "merged_array.txt",
        "icon": "➕"
    },
    {
        "id": "array-diff",
        "name": "Array Diff",
        "description": "Find items only in the first, only in the second, or in either array, without losing large-number precision",
        "endpoint": "/api/arrays/diff",
        "tags": ["array", "diff", "compare", "numbers"],
        "download_name": "array_diff.txt",
        "icon": "➖"
    },
    {
        "id": "url-processor",
        "name": "URL Parameter Extractor",
        "description": "Collect one query parameter value per distinct URL endpoint",
        "endpoint": "/api/url-processor/extract",
        "tags": ["url", "query", "parameter", "extract"],
        "download_name": "url_processed.txt",
        "icon": "🔗"
    },
]
