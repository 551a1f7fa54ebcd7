QUESTIONS = [
    {
        "id": "enhanced-bit-1",
        "question": "Single Number - Given array where every element appears twice except one, find the single element.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "This problem can be solved in different ways, with the XOR approach being the most efficient. We can also extend the solution to handle variations like finding one number among triplets or finding two single numbers.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "XOR Approach: a ^ a = 0 and a ^ 0 = a, so pairs cancel and the single element remains. Time: O(n), Space: O(1)",
                "code": (
                    "def single_number(nums):\n"
                    "    result = 0\n"
                    "    for num in nums:\n"
                    "        result ^= num\n"
                    "    return result\n"
                ),
            },
            {
                "language": "java",
                "approach": "optimal",
                "explanation": "XOR Approach in Java. Time: O(n), Space: O(1)",
                "code": (
                    "public int singleNumber(int[] nums) {\n"
                    "    int result = 0;\n"
                    "    for (int num : nums) {\n"
                    "        result ^= num;\n"
                    "    }\n"
                    "    return result;\n"
                    "}\n"
                ),
            },
            {
                "language": "python",
                "approach": "moderate",
                "explanation": "Hash Set Approach: add on first sight, remove on second. Time: O(n), Space: O(n)",
                "code": (
                    "def single_number(nums):\n"
                    "    seen = set()\n"
                    "    for num in nums:\n"
                    "        seen ^= {num}\n"
                    "    return seen.pop()\n"
                ),
            },
        ],
        "sample_answer": "XOR all numbers; duplicates cancel out.",
        "tips": [
            "XOR properties: a ⊕ a = 0, a ⊕ 0 = a, commutative",
            "For three occurrences, use finite state machine",
            "For two singles, partition by differentiating bit",
        ],
        "tags": ["bit-manipulation", "array", "math"],
        "estimated_time": 20,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-bit-2",
        "question": "Number of 1 Bits - Write function that takes unsigned integer and returns number of '1' bits.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Brian Kernighan's trick: n & (n - 1) clears the lowest set bit, so the loop runs once per set bit.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Kernighan's loop. Time: O(set bits), Space: O(1)",
                "code": (
                    "def hamming_weight(n):\n"
                    "    count = 0\n"
                    "    while n:\n"
                    "        n &= n - 1\n"
                    "        count += 1\n"
                    "    return count\n"
                ),
            },
        ],
        "sample_answer": "Clear the lowest set bit until zero.",
        "tips": ["Count iterations until n becomes 0"],
        "tags": ["bit-manipulation", "math"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-bit-5",
        "question": "Power of Two - Given integer n, return true if it is a power of two.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Powers of two have exactly one bit set, so n > 0 and n & (n - 1) == 0.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Single-bit check. Time: O(1), Space: O(1)",
                "code": (
                    "def is_power_of_two(n):\n"
                    "    return n > 0 and n & (n - 1) == 0\n"
                ),
            },
        ],
        "sample_answer": "Exactly one set bit.",
        "tips": ["Handle edge case: n must be positive"],
        "tags": ["bit-manipulation", "math"],
        "estimated_time": 10,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-bit-6",
        "question": "Missing Number - Given array containing n distinct numbers in range [0, n], find the missing number.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "XOR every index and value together; everything pairs up except the missing number. The arithmetic-sum formula works too.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "XOR of indices and values. Time: O(n), Space: O(1)",
                "code": (
                    "def missing_number(nums):\n"
                    "    result = len(nums)\n"
                    "    for i, num in enumerate(nums):\n"
                    "        result ^= i ^ num\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "XOR indices with values.",
        "tips": [
            "Sum approach: expected_sum - actual_sum",
            "Binary search works if array is sorted",
        ],
        "tags": ["bit-manipulation", "array", "math", "binary-search"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
