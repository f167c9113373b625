# cdatax

This package provides four small generic container types. Each one supports `len()` and iteration. Each one raises a clear exception when it is misused.

| Class | Module | What it is |
| --- | --- | --- |
| `DynamicArray` | `cdatax.dynarray` | An append-only array. Its reserved capacity doubles when it is full. |
| `LinkedList` | `cdatax.linkedlist` | A doubly linked list. You can insert at any position. Lookups walk from whichever end is nearer. |
| `RingQueue` | `cdatax.ringqueue` | A FIFO queue on a circular buffer. The buffer doubles when it is full. |
| `Stack` | `cdatax.stack` | A LIFO stack. Its reserved capacity doubles when it is full. |

`DynamicArray`, `RingQueue` and `Stack` take an initial capacity, `reserve`, which defaults to 4. The current value is available as the read-only property `capacity`.

## Installation

```
pip install cdatax
```

## Usage

```python
from cdatax.dynarray import DynamicArray
from cdatax.linkedlist import LinkedList
from cdatax.ringqueue import RingQueue
from cdatax.stack import Stack

arr = DynamicArray(reserve=2)
for n in range(5):
    arr.append(n)
arr[3]            # 3
arr[-1]           # 4
len(arr)          # 5
arr.capacity      # 8

lst = LinkedList([1, 3])
lst.insert(1, 2)
lst.append(4)
list(lst)             # [1, 2, 3, 4]
list(reversed(lst))   # [4, 3, 2, 1]
lst.first(), lst.last()   # (1, 4)
lst[-2]               # 3

q = RingQueue()
q.enqueue("a")
q.enqueue("b")
q.front()     # "a"
q.back()      # "b"
q.dequeue()   # "a"
list(q)       # ["b"]  (front to back)

s = Stack()
s.push(1)
s.push(2)
s.top()   # 2
s.pop()   # 2
len(s)    # 1
list(s)   # [1]  (bottom to top)
```

## Indexing

`DynamicArray` and `LinkedList` accept negative indices, which count from the end as they do for Python lists. `LinkedList.insert` accepts any position from `-len` up to and including `len`. Inserting at `len` appends.

## Errors

- An index outside the valid range raises `IndexError`.
- `first`/`last` on an empty `LinkedList` raise `IndexError`.
- `dequeue`, `front` and `back` on an empty `RingQueue` raise `IndexError`.
- `pop` and `top` on an empty `Stack` raise `IndexError`.
- A `reserve` below 1 raises `ValueError`.

## Limits

These containers only grow or shrink in the ways shown above. There is no removal by position from `DynamicArray` or `LinkedList`, and there is no way to shrink a reserved capacity.

## Running the tests

```
pip install -e ".[test]"
pytest
```