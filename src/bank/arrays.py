QUESTIONS = [
    {
        "id": "enhanced-array-1",
        "question": "Two Sum - Given an array of integers nums and an integer target, return indices of the two numbers such that they add up to target.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "There are two main approaches: 1) Brute Force (O(n²)): check every pair. 2) Hash Map (O(n)): store each value's index and look up the complement (target - current) before inserting. The hash map approach trades space for time.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "brute-force",
                "explanation": "Check every pair of indices. Time: O(n²), Space: O(1)",
                "code": (
                    "def two_sum(nums, target):\n"
                    "    for i in range(len(nums)):\n"
                    "        for j in range(i + 1, len(nums)):\n"
                    "            if nums[i] + nums[j] == target:\n"
                    "                return [i, j]\n"
                    "    return []\n"
                ),
            },
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "One pass with a hash map from value to index. Time: O(n), Space: O(n)",
                "code": (
                    "def two_sum(nums, target):\n"
                    "    seen = {}\n"
                    "    for i, num in enumerate(nums):\n"
                    "        if target - num in seen:\n"
                    "            return [seen[target - num], i]\n"
                    "        seen[num] = i\n"
                    "    return []\n"
                ),
            },
        ],
        "sample_answer": "Use a hash map to store complements for O(n) lookup.",
        "tips": [
            "Hash map approach trades space for time efficiency",
            "Consider edge cases: empty array, no solution, duplicate numbers",
            "Explain why we can't use the same element twice",
            "Discuss follow-up: what if array is sorted?",
        ],
        "tags": ["array", "hash-table", "two-pointers"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-array-2",
        "question": "Best Time to Buy and Sell Stock - You are given an array prices where prices[i] is the price of a given stock on the ith day. Find the maximum profit you can achieve.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Track the minimum price seen so far and the best profit at each step. A single pass is optimal with O(n) time and O(1) space.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Single pass keeping the running minimum. Time: O(n), Space: O(1)",
                "code": (
                    "def max_profit(prices):\n"
                    "    lowest, best = float('inf'), 0\n"
                    "    for price in prices:\n"
                    "        lowest = min(lowest, price)\n"
                    "        best = max(best, price - lowest)\n"
                    "    return best\n"
                ),
            },
            {
                "language": "java",
                "approach": "optimal",
                "explanation": "Same single pass in Java. Time: O(n), Space: O(1)",
                "code": (
                    "public int maxProfit(int[] prices) {\n"
                    "    int min = Integer.MAX_VALUE, best = 0;\n"
                    "    for (int p : prices) {\n"
                    "        min = Math.min(min, p);\n"
                    "        best = Math.max(best, p - min);\n"
                    "    }\n"
                    "    return best;\n"
                    "}\n"
                ),
            },
        ],
        "sample_answer": "Buy at the lowest price seen before each sell day.",
        "tips": [
            "Only one transaction allowed (buy once, sell once)",
            "Consider edge cases: empty array, decreasing prices",
        ],
        "tags": ["array", "dynamic-programming", "greedy"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-array-5",
        "question": "Maximum Subarray (Kadane's Algorithm) - Given an integer array nums, find the contiguous subarray with the largest sum and return its sum.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Kadane's algorithm tracks the best sum ending at each position and the global best. A divide and conquer solution runs in O(n log n).",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "At each index decide whether to extend the current subarray or start a new one. Time: O(n), Space: O(1)",
                "code": (
                    "def max_sub_array(nums):\n"
                    "    current = best = nums[0]\n"
                    "    for num in nums[1:]:\n"
                    "        current = max(num, current + num)\n"
                    "        best = max(best, current)\n"
                    "    return best\n"
                ),
            },
        ],
        "sample_answer": "Kadane's algorithm gives O(n) time and O(1) space.",
        "tips": [
            "Key insight: extend or restart at every position",
            "Handle the all-negative case",
        ],
        "tags": ["array", "dynamic-programming", "divide-and-conquer"],
        "estimated_time": 20,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-array-12",
        "question": "Trapping Rain Water - Given n non-negative integers representing elevation map, compute how much water it can trap after raining.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Water above a bar is min(max_left, max_right) - height. Two pointers move the side with the smaller wall inward and keep running maxima, giving O(n) time and O(1) space.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Two pointers with running maxima. Time: O(n), Space: O(1)",
                "code": (
                    "def trap(height):\n"
                    "    left, right = 0, len(height) - 1\n"
                    "    left_max = right_max = water = 0\n"
                    "    while left < right:\n"
                    "        if height[left] < height[right]:\n"
                    "            left_max = max(left_max, height[left])\n"
                    "            water += left_max - height[left]\n"
                    "            left += 1\n"
                    "        else:\n"
                    "            right_max = max(right_max, height[right])\n"
                    "            water += right_max - height[right]\n"
                    "            right -= 1\n"
                    "    return water\n"
                ),
            },
        ],
        "sample_answer": "Two pointers with left and right maxima.",
        "tips": [
            "Water level at position = min(max_left, max_right) - height[i]",
            "DP approach pre-computes max heights for each position",
            "Stack approach processes water layer by layer",
        ],
        "tags": ["array", "two-pointers", "dynamic-programming", "stack"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-array-15",
        "question": "Sliding Window Maximum - Given array and sliding window of size k, return max element in each window position.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Keep a deque of indices whose values are in decreasing order; the front is always the maximum of the current window. Each index enters and leaves the deque once.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Monotonic deque of indices. Time: O(n), Space: O(k)",
                "code": (
                    "from collections import deque\n\n"
                    "def max_sliding_window(nums, k):\n"
                    "    window, result = deque(), []\n"
                    "    for i, num in enumerate(nums):\n"
                    "        while window and nums[window[-1]] < num:\n"
                    "            window.pop()\n"
                    "        window.append(i)\n"
                    "        if window[0] <= i - k:\n"
                    "            window.popleft()\n"
                    "        if i >= k - 1:\n"
                    "            result.append(nums[window[0]])\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "Monotonic deque gives O(n).",
        "tips": [
            "Front of deque always contains maximum of current window",
            "Remove indices outside window and smaller elements",
        ],
        "tags": ["array", "sliding-window", "deque", "heap"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
