QUESTIONS = [
    {
        "id": "enhanced-search-1",
        "question": "Binary Search - Given a sorted array of integers nums and an integer target, return the index of target or -1 if not found.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Halve the search interval each step by comparing the middle element with the target.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Iterative binary search. Time: O(log n), Space: O(1)",
                "code": (
                    "def search(nums, target):\n"
                    "    lo, hi = 0, len(nums) - 1\n"
                    "    while lo <= hi:\n"
                    "        mid = (lo + hi) // 2\n"
                    "        if nums[mid] == target:\n"
                    "            return mid\n"
                    "        if nums[mid] < target:\n"
                    "            lo = mid + 1\n"
                    "        else:\n"
                    "            hi = mid - 1\n"
                    "    return -1\n"
                ),
            },
        ],
        "sample_answer": "Classic binary search.",
        "tips": ["Be precise about inclusive vs exclusive bounds"],
        "tags": ["array", "binary-search"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-search-2",
        "question": "Search in Rotated Sorted Array - Given a rotated sorted array and target, return the index of target or -1.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "At every step one half of the interval is sorted; check whether the target lies in that half and discard the other.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Modified binary search. Time: O(log n), Space: O(1)",
                "code": (
                    "def search(nums, target):\n"
                    "    lo, hi = 0, len(nums) - 1\n"
                    "    while lo <= hi:\n"
                    "        mid = (lo + hi) // 2\n"
                    "        if nums[mid] == target:\n"
                    "            return mid\n"
                    "        if nums[lo] <= nums[mid]:\n"
                    "            if nums[lo] <= target < nums[mid]:\n"
                    "                hi = mid - 1\n"
                    "            else:\n"
                    "                lo = mid + 1\n"
                    "        else:\n"
                    "            if nums[mid] < target <= nums[hi]:\n"
                    "                lo = mid + 1\n"
                    "            else:\n"
                    "                hi = mid - 1\n"
                    "    return -1\n"
                ),
            },
        ],
        "sample_answer": "Identify the sorted half each step.",
        "tips": ["Duplicates break the O(log n) guarantee"],
        "tags": ["array", "binary-search"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-sort-1",
        "question": "Merge Sort Implementation - Implement merge sort algorithm and explain its time/space complexity.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Divide the array in halves, sort each recursively, and merge the two sorted halves. Stable and O(n log n) in every case.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Top-down merge sort. Time: O(n log n), Space: O(n)",
                "code": (
                    "def merge_sort(nums):\n"
                    "    if len(nums) <= 1:\n"
                    "        return nums\n"
                    "    mid = len(nums) // 2\n"
                    "    left, right = merge_sort(nums[:mid]), merge_sort(nums[mid:])\n"
                    "    merged, i, j = [], 0, 0\n"
                    "    while i < len(left) and j < len(right):\n"
                    "        if left[i] <= right[j]:\n"
                    "            merged.append(left[i]); i += 1\n"
                    "        else:\n"
                    "            merged.append(right[j]); j += 1\n"
                    "    return merged + left[i:] + right[j:]\n"
                ),
            },
        ],
        "sample_answer": "Divide, sort halves, merge.",
        "tips": ["Use <= in the merge to keep the sort stable"],
        "tags": ["sorting", "divide-and-conquer", "merge-sort"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
