QUESTIONS = [
    {
        "id": "enhanced-string-1",
        "question": "Valid Anagram - Given two strings s and t, return true if t is an anagram of s, and false otherwise.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Compare character frequencies with a counter (O(n)) or compare the sorted strings (O(n log n)).",
        "code_implementation": [
            {
                "language": "python",
                "approach": "moderate",
                "explanation": "Sort both strings and compare. Time: O(n log n), Space: O(n)",
                "code": (
                    "def is_anagram(s, t):\n"
                    "    return sorted(s) == sorted(t)\n"
                ),
            },
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Count characters. Time: O(n), Space: O(1) for a fixed alphabet",
                "code": (
                    "from collections import Counter\n\n"
                    "def is_anagram(s, t):\n"
                    "    return len(s) == len(t) and Counter(s) == Counter(t)\n"
                ),
            },
        ],
        "sample_answer": "Equal character counts means anagram.",
        "tips": [
            "Check lengths first for an early exit",
            "Ask about unicode input",
        ],
        "tags": ["string", "hash-table", "sorting"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-string-2",
        "question": "Valid Parentheses - Given a string s containing just the characters '(', ')', '{', '}', '[' and ']', determine if the input string is valid.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Push opening brackets onto a stack; each closing bracket must match the top of the stack. The string is valid when the stack ends empty.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Stack of expected closers. Time: O(n), Space: O(n)",
                "code": (
                    "def is_valid(s):\n"
                    "    pairs = {')': '(', ']': '[', '}': '{'}\n"
                    "    stack = []\n"
                    "    for ch in s:\n"
                    "        if ch in pairs:\n"
                    "            if not stack or stack.pop() != pairs[ch]:\n"
                    "                return False\n"
                    "        else:\n"
                    "            stack.append(ch)\n"
                    "    return not stack\n"
                ),
            },
        ],
        "sample_answer": "Use a stack to match brackets.",
        "tips": [
            "Odd length strings are never valid",
            "Check for a non-empty stack at the end",
        ],
        "tags": ["string", "stack"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-string-4",
        "question": "Minimum Window Substring - Given two strings s and t, return the minimum window substring of s such that every character in t is included in the window.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Expand the right edge of a sliding window until it covers all required characters, then shrink from the left while it still does, recording the smallest window.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Sliding window with a need counter. Time: O(|s| + |t|), Space: O(|t|)",
                "code": (
                    "from collections import Counter\n\n"
                    "def min_window(s, t):\n"
                    "    need, missing = Counter(t), len(t)\n"
                    "    left = start = 0\n"
                    "    end = 0\n"
                    "    for right, ch in enumerate(s, 1):\n"
                    "        if need[ch] > 0:\n"
                    "            missing -= 1\n"
                    "        need[ch] -= 1\n"
                    "        if missing == 0:\n"
                    "            while need[s[left]] < 0:\n"
                    "                need[s[left]] += 1\n"
                    "                left += 1\n"
                    "            if end == 0 or right - left < end - start:\n"
                    "                start, end = left, right\n"
                    "            need[s[left]] += 1\n"
                    "            missing += 1\n"
                    "            left += 1\n"
                    "    return s[start:end]\n"
                ),
            },
        ],
        "sample_answer": "Variable-size sliding window with character counts.",
        "tips": [
            "Track how many characters are still missing",
            "Shrink only while the window stays valid",
        ],
        "tags": ["string", "sliding-window", "hash-table"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-string-6",
        "question": "Longest Substring Without Repeating Characters - Given a string s, find the length of the longest substring without repeating characters.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Slide a window and remember the last index of each character; when a repeat appears inside the window, jump the left edge past it.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Last-seen index map. Time: O(n), Space: O(min(n, alphabet))",
                "code": (
                    "def length_of_longest_substring(s):\n"
                    "    last, left, best = {}, 0, 0\n"
                    "    for right, ch in enumerate(s):\n"
                    "        if last.get(ch, -1) >= left:\n"
                    "            left = last[ch] + 1\n"
                    "        last[ch] = right\n"
                    "        best = max(best, right - left + 1)\n"
                    "    return best\n"
                ),
            },
        ],
        "sample_answer": "Sliding window with a last-seen map.",
        "tips": ["The left edge only ever moves forward"],
        "tags": ["string", "sliding-window", "hash-table"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-string-7",
        "question": "Valid Palindrome - A phrase is a palindrome if it reads the same forward and backward after converting to lowercase and removing non-alphanumeric characters.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Two pointers from both ends skip non-alphanumeric characters and compare lowercase characters.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Two pointers without building a cleaned copy. Time: O(n), Space: O(1)",
                "code": (
                    "def is_palindrome(s):\n"
                    "    left, right = 0, len(s) - 1\n"
                    "    while left < right:\n"
                    "        if not s[left].isalnum():\n"
                    "            left += 1\n"
                    "        elif not s[right].isalnum():\n"
                    "            right -= 1\n"
                    "        elif s[left].lower() != s[right].lower():\n"
                    "            return False\n"
                    "        else:\n"
                    "            left, right = left + 1, right - 1\n"
                    "    return True\n"
                ),
            },
        ],
        "sample_answer": "Two pointers skipping punctuation.",
        "tips": ["An empty string is a palindrome"],
        "tags": ["string", "two-pointers"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
