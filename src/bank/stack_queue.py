QUESTIONS = [
    {
        "id": "enhanced-stack-2",
        "question": "Min Stack - Design a stack that supports push, pop, top, and retrieving the minimum element in constant time.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Store each value together with the minimum at the time it was pushed, so the current minimum is always on top.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Pairs of (value, running min). All operations O(1)",
                "code": (
                    "class MinStack:\n"
                    "    def __init__(self):\n"
                    "        self.items = []\n\n"
                    "    def push(self, val):\n"
                    "        low = min(val, self.items[-1][1]) if self.items else val\n"
                    "        self.items.append((val, low))\n\n"
                    "    def pop(self):\n"
                    "        self.items.pop()\n\n"
                    "    def top(self):\n"
                    "        return self.items[-1][0]\n\n"
                    "    def get_min(self):\n"
                    "        return self.items[-1][1]\n"
                ),
            },
        ],
        "sample_answer": "Keep the running minimum alongside each value.",
        "tips": ["A second stack of minimums saves space with many duplicates"],
        "tags": ["stack", "design"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-stack-3",
        "question": "Evaluate Reverse Polish Notation - Evaluate the value of an arithmetic expression in Reverse Polish Notation.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Push numbers; on an operator pop two operands, apply it, and push the result.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Operand stack. Time: O(n), Space: O(n)",
                "code": (
                    "def eval_rpn(tokens):\n"
                    "    stack = []\n"
                    "    for tok in tokens:\n"
                    "        if tok in '+-*/':\n"
                    "            b, a = stack.pop(), stack.pop()\n"
                    "            if tok == '+': stack.append(a + b)\n"
                    "            elif tok == '-': stack.append(a - b)\n"
                    "            elif tok == '*': stack.append(a * b)\n"
                    "            else: stack.append(int(a / b))\n"
                    "        else:\n"
                    "            stack.append(int(tok))\n"
                    "    return stack[0]\n"
                ),
            },
        ],
        "sample_answer": "Stack-based evaluation.",
        "tips": ["Division truncates toward zero"],
        "tags": ["stack", "math", "array"],
        "estimated_time": 20,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-stack-4",
        "question": "Daily Temperatures - Given an array of integers temperatures, return an array answer such that answer[i] is the number of days you have to wait for a warmer temperature.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "A monotonic decreasing stack of indices; each warmer day resolves every colder day waiting on the stack.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Monotonic stack. Time: O(n), Space: O(n)",
                "code": (
                    "def daily_temperatures(temps):\n"
                    "    answer, stack = [0] * len(temps), []\n"
                    "    for i, t in enumerate(temps):\n"
                    "        while stack and temps[stack[-1]] < t:\n"
                    "            j = stack.pop()\n"
                    "            answer[j] = i - j\n"
                    "        stack.append(i)\n"
                    "    return answer\n"
                ),
            },
        ],
        "sample_answer": "Monotonic stack of pending days.",
        "tips": ["Each index is pushed and popped once"],
        "tags": ["array", "stack", "monotonic-stack"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
