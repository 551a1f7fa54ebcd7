QUESTIONS = [
    {
        "id": "enhanced-dp-1",
        "question": "Climbing Stairs - You are climbing a staircase with n steps. Each time you can climb 1 or 2 steps. How many distinct ways can you climb to the top?",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "The count follows the Fibonacci recurrence f(n) = f(n-1) + f(n-2). Only the last two values are needed.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "brute-force",
                "explanation": "Plain recursion. Time: O(2^n), Space: O(n)",
                "code": (
                    "def climb_stairs(n):\n"
                    "    if n <= 2:\n"
                    "        return n\n"
                    "    return climb_stairs(n - 1) + climb_stairs(n - 2)\n"
                ),
            },
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Two rolling variables. Time: O(n), Space: O(1)",
                "code": (
                    "def climb_stairs(n):\n"
                    "    a, b = 1, 1\n"
                    "    for _ in range(n):\n"
                    "        a, b = b, a + b\n"
                    "    return a\n"
                ),
            },
        ],
        "sample_answer": "Fibonacci with O(1) space.",
        "tips": [
            "Recognize Fibonacci pattern: f(n) = f(n-1) + f(n-2)",
            "Memoization prevents redundant recursive calculations",
        ],
        "tags": ["dynamic-programming", "math", "recursion"],
        "estimated_time": 20,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-dp-6",
        "question": "Coin Change - Given coins of different denominations and amount, return the fewest coins needed to make up that amount.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Unbounded knapsack: dp[a] is the minimum coins for amount a, built bottom-up from dp[a - coin] + 1. BFS over amounts gives the same answer.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Bottom-up DP. Time: O(amount * coins), Space: O(amount)",
                "code": (
                    "def coin_change(coins, amount):\n"
                    "    dp = [0] + [amount + 1] * amount\n"
                    "    for a in range(1, amount + 1):\n"
                    "        for coin in coins:\n"
                    "            if coin <= a:\n"
                    "                dp[a] = min(dp[a], dp[a - coin] + 1)\n"
                    "    return dp[amount] if dp[amount] <= amount else -1\n"
                ),
            },
        ],
        "sample_answer": "Minimum coins DP table.",
        "tips": ["Greedy fails for arbitrary denominations"],
        "tags": ["dynamic-programming", "bfs"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-dp-7",
        "question": "Longest Increasing Subsequence - Given an integer array nums, return the length of the longest strictly increasing subsequence.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "O(n²) DP over LIS ending at each index, or patience sorting: keep the smallest tail for each length and binary search the insertion point.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Tails array with bisect. Time: O(n log n), Space: O(n)",
                "code": (
                    "from bisect import bisect_left\n\n"
                    "def length_of_lis(nums):\n"
                    "    tails = []\n"
                    "    for num in nums:\n"
                    "        i = bisect_left(tails, num)\n"
                    "        if i == len(tails):\n"
                    "            tails.append(num)\n"
                    "        else:\n"
                    "            tails[i] = num\n"
                    "    return len(tails)\n"
                ),
            },
        ],
        "sample_answer": "Patience sorting with binary search.",
        "tips": ["tails is not itself a valid subsequence"],
        "tags": ["dynamic-programming", "binary-search", "array"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-dp-5",
        "question": "Edit Distance (Levenshtein Distance) - Given two strings word1 and word2, return the minimum operations to convert word1 to word2.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "dp[i][j] is the distance between prefixes; matching characters cost nothing, otherwise take 1 + min of insert, delete and replace.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Rolling single row. Time: O(m*n), Space: O(n)",
                "code": (
                    "def min_distance(word1, word2):\n"
                    "    prev = list(range(len(word2) + 1))\n"
                    "    for i, a in enumerate(word1, 1):\n"
                    "        cur = [i]\n"
                    "        for j, b in enumerate(word2, 1):\n"
                    "            if a == b:\n"
                    "                cur.append(prev[j - 1])\n"
                    "            else:\n"
                    "                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))\n"
                    "        prev = cur\n"
                    "    return prev[-1]\n"
                ),
            },
        ],
        "sample_answer": "Classic 2D DP over prefixes.",
        "tips": [
            "Three operations: insert, delete, replace",
            "If characters match, no operation needed",
        ],
        "tags": ["dynamic-programming", "string"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
