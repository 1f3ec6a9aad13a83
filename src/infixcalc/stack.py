from collections import deque

from .util import InvalidExpression, StackOverflow


class OperandStack:
    '''
    Bounded stack of floats.

    Pushing past capacity is a stack overflow, popping an empty stack is an
    invalid expression. Neither ever grows nor reads past the stack.
    '''

    def __init__(self, capacity):
        self.capacity = capacity
        self.items = deque()

    def __len__(self):
        return len(self.items)

    def __bool__(self):
        return bool(self.items)

    def push(self, value):
        if len(self.items) >= self.capacity:
            raise StackOverflow()
        self.items.append(value)

    def pop(self):
        if not self.items:
            raise InvalidExpression()
        return self.items.pop()

    def clear(self):
        self.items.clear()


class OperatorStack(OperandStack):
    '''
    Bounded stack of operators.

    Also counts every push since the last clear. Reaching capacity with that
    count overflows even if the stack itself is shallow, so the number of
    operators in one evaluation is limited, not just their nesting.
    '''

    def __init__(self, capacity):
        super().__init__(capacity)
        self.total_pushed = 0

    def push(self, operator):
        if self.total_pushed >= self.capacity:
            raise StackOverflow()
        super().push(operator)
        self.total_pushed += 1

    def peek(self):
        '''
        Return the operator on top of the stack, or None if empty.
        '''
        return self.items[-1] if self.items else None

    def clear(self):
        super().clear()
        self.total_pushed = 0
