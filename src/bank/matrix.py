QUESTIONS = [
    {
        "id": "enhanced-matrix-1",
        "question": "Spiral Matrix - Given m x n matrix, return all elements in spiral order.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Walk the boundary layer by layer, shrinking top, bottom, left and right limits after each side is consumed.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Shrinking boundaries. Time: O(m*n), Space: O(1) besides output",
                "code": (
                    "def spiral_order(matrix):\n"
                    "    result = []\n"
                    "    top, bottom = 0, len(matrix) - 1\n"
                    "    left, right = 0, len(matrix[0]) - 1\n"
                    "    while top <= bottom and left <= right:\n"
                    "        result += matrix[top][left:right + 1]\n"
                    "        top += 1\n"
                    "        result += [matrix[r][right] for r in range(top, bottom + 1)]\n"
                    "        right -= 1\n"
                    "        if top <= bottom:\n"
                    "            result += matrix[bottom][left:right + 1][::-1]\n"
                    "            bottom -= 1\n"
                    "        if left <= right:\n"
                    "            result += [matrix[r][left] for r in range(bottom, top - 1, -1)]\n"
                    "            left += 1\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "Peel the matrix layer by layer.",
        "tips": ["Single row and single column matrices are the edge cases"],
        "tags": ["matrix", "array", "simulation"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-matrix-2",
        "question": "Word Search II - Given an m x n board of characters and a list of words, return all words that can be formed from sequentially adjacent cells.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Build a trie of the words and run DFS with backtracking from every cell, following trie edges so that dead prefixes are pruned immediately.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Trie-guided DFS. Time: O(m*n*4^L), Space: O(total word length)",
                "code": (
                    "def find_words(board, words):\n"
                    "    trie = {}\n"
                    "    for w in words:\n"
                    "        node = trie\n"
                    "        for ch in w:\n"
                    "            node = node.setdefault(ch, {})\n"
                    "        node['$'] = w\n"
                    "    found = set()\n\n"
                    "    def dfs(r, c, node):\n"
                    "        ch = board[r][c]\n"
                    "        nxt = node.get(ch)\n"
                    "        if not nxt:\n"
                    "            return\n"
                    "        if '$' in nxt:\n"
                    "            found.add(nxt['$'])\n"
                    "        board[r][c] = '#'\n"
                    "        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):\n"
                    "            nr, nc = r + dr, c + dc\n"
                    "            if 0 <= nr < len(board) and 0 <= nc < len(board[0]):\n"
                    "                dfs(nr, nc, nxt)\n"
                    "        board[r][c] = ch\n\n"
                    "    for r in range(len(board)):\n"
                    "        for c in range(len(board[0])):\n"
                    "            dfs(r, c, trie)\n"
                    "    return list(found)\n"
                ),
            },
        ],
        "sample_answer": "Trie plus backtracking DFS.",
        "tips": ["Restore the cell after exploring it"],
        "tags": ["matrix", "trie", "dfs", "backtracking"],
        "estimated_time": 40,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
