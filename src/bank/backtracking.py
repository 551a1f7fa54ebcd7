QUESTIONS = [
    {
        "id": "enhanced-backtrack-1",
        "question": "Generate Parentheses - Given n pairs of parentheses, write a function to generate all combinations of well-formed parentheses.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Backtrack by appending '(' while open < n and ')' while close < open. Every leaf at length 2n is a valid combination.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Backtracking with open/close counters. Time: O(4^n / sqrt(n))",
                "code": (
                    "def generate_parenthesis(n):\n"
                    "    result = []\n\n"
                    "    def build(prefix, opened, closed):\n"
                    "        if len(prefix) == 2 * n:\n"
                    "            result.append(prefix)\n"
                    "            return\n"
                    "        if opened < n:\n"
                    "            build(prefix + '(', opened + 1, closed)\n"
                    "        if closed < opened:\n"
                    "            build(prefix + ')', opened, closed + 1)\n\n"
                    "    build('', 0, 0)\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "Backtracking with counts.",
        "tips": [
            "Add '(' when open < n, add ')' when close < open",
            "DP approach uses Catalan number recurrence",
        ],
        "tags": ["backtracking", "string", "recursion"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-backtrack-2",
        "question": "Permutations - Given array of distinct integers, return all possible permutations.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Choose each unused element in turn, recurse, then undo the choice.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Swap-based in-place backtracking. Time: O(n * n!)",
                "code": (
                    "def permute(nums):\n"
                    "    result = []\n\n"
                    "    def backtrack(start):\n"
                    "        if start == len(nums):\n"
                    "            result.append(nums[:])\n"
                    "        for i in range(start, len(nums)):\n"
                    "            nums[start], nums[i] = nums[i], nums[start]\n"
                    "            backtrack(start + 1)\n"
                    "            nums[start], nums[i] = nums[i], nums[start]\n\n"
                    "    backtrack(0)\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "Backtrack over positions.",
        "tips": ["For duplicates: sort first and skip duplicate branches"],
        "tags": ["backtracking", "array", "recursion"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-backtrack-4",
        "question": "N-Queens - Place n queens on n×n chessboard so that no two queens attack each other.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Place queens row by row, tracking occupied columns and both diagonal families (row-col and row+col) in sets.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Row-by-row backtracking with conflict sets. Time: O(n!)",
                "code": (
                    "def solve_n_queens(n):\n"
                    "    cols, diag, anti, board, result = set(), set(), set(), [], []\n\n"
                    "    def place(row):\n"
                    "        if row == n:\n"
                    "            result.append(['.' * c + 'Q' + '.' * (n - c - 1) for c in board])\n"
                    "            return\n"
                    "        for c in range(n):\n"
                    "            if c in cols or row - c in diag or row + c in anti:\n"
                    "                continue\n"
                    "            cols.add(c); diag.add(row - c); anti.add(row + c); board.append(c)\n"
                    "            place(row + 1)\n"
                    "            cols.remove(c); diag.remove(row - c); anti.remove(row + c); board.pop()\n\n"
                    "    place(0)\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "Backtracking with column and diagonal sets.",
        "tips": [
            "Diagonals identified by row±col values",
            "Bit manipulation can optimize conflict checking",
        ],
        "tags": ["backtracking", "array", "bit-manipulation"],
        "estimated_time": 35,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
