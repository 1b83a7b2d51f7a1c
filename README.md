# algobox

A collection of classic algorithms and data structures in plain Python,
using only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.binary_tree` | `TreeNode`, `ParentNode`, traversals (`preorder_traversal`, `inorder_traversal`, `postorder_traversal`, `level_order`, `zigzag_level_order`), `is_same_tree`, `is_symmetric`, `is_balanced`, `has_path_sum`, `path_sum_paths`, `count_path_sums`, `binary_tree_paths`, `flatten`, `lowest_common_ancestor`, `lowest_common_ancestor_with_parents` |
| `algobox.nary_tree` | `NaryNode`, `preorder`, `postorder`, `level_order` |
| `algobox.linked_list` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `remove_nth_from_end`, `merge_two_lists`, `merge_k_lists`, `reverse_list`, `reverse_between`, `reverse_k_group`, `rotate_right`, `delete_duplicates`, `delete_all_duplicates`, `insertion_sort_list`, `sort_list`, `get_intersection_node`, `is_palindrome`, `delete_node`, `odd_even_list`, `split_list_to_parts`, `sorted_list_to_bst` |
| `algobox.bst` | `sorted_array_to_bst`, `balance_bst`, `search_bst`, `insert_into_bst`, `delete_bst`, `increasing_bst`, `lowest_common_ancestor_bst`, `BSTIterator` |
| `algobox.stock` | `max_profit`, `max_profit_unlimited`, `max_profit_two`, `max_profit_k`, `max_profit_cooldown`, `max_profit_with_fee` |
| `algobox.dp_sequences` | `rob`, `rob_circular`, `climb_stairs`, `min_cost_climbing_stairs`, `min_cost_paint` |
| `algobox.dp_grids` | `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum` |
| `algobox.caches` | `LRUCache`, `BrowserHistory`, `RecentCounter` |
| `algobox.stacks` | `MinStack`, `MaxStack`, `QueueStack` (a stack kept in one queue), `StackQueue` (a queue kept in two stacks) |
| `algobox.containers` | `CircularQueue`, `CircularDeque`, `KthLargest`, `LinkedList`, `RandomizedSet` |
| `algobox.numeric` | `num_squares`, `max_sub_array`, `count_bits`, `int_sqrt`, `divide`, `find_median_sorted_arrays` |
| `algobox.searching` | `search`, `binary_search_closed`, `search_insert`, `search_range` |
| `algobox.arrays` | `two_sum`, `longest_consecutive`, `min_sub_array_len`, `max_sliding_window`, `daily_temperatures`, `move_zeroes`, `sort_colors`, `reverse_pairs` |
| `algobox.text` | `is_covered`, `longest_common_prefix`, `length_of_longest_substring`, `longest_palindrome`, `partition_labels`, `open_lock` |
| `algobox.combinatorics` | `combine`, `subsets` |

## Examples

```python
from algobox.linked_list import build_list, list_values, reverse_list
from algobox.caches import LRUCache
from algobox.arrays import daily_temperatures
from algobox.text import partition_labels

list_values(reverse_list(build_list([1, 2, 3])))    # [3, 2, 1]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                         # 1
cache.put(3, 3)                                      # evicts key 2
cache.get(2)                                         # -1

daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73]) # [1, 1, 4, 2, 1, 1, 0, 0]
partition_labels("ababcbacadefegdehijhklij")         # [9, 7, 8]
```

`BSTIterator` is also a Python iterator, so `list(BSTIterator(root))` gives the
values of a search tree in ascending order. `RandomizedSet` takes an optional
`random.Random` instance, which makes `get_random` reproducible.

## Behaviour worth knowing

- Some functions change their input in place: `move_zeroes` and `sort_colors`
  reorder the list they are given, `flatten` rewires the tree, `delete_bst` and
  `insert_into_bst` modify the tree, and most linked-list functions relink the
  nodes they receive (`sorted_list_to_bst` cuts the list apart).
- `two_sum` returns `[later_index, earlier_index]`; `combine` lists
  combinations in reverse lexicographic order.
- Where the result would be meaningless, functions raise: `ValueError` for
  invalid sizes or ranges (for example `k < 1` in `reverse_k_group`), `IndexError`
  when popping or peeking an empty `MaxStack`, `QueueStack` or `StackQueue`, and
  `ZeroDivisionError` from `divide` with a zero divisor. Others keep the classic
  sentinel results, such as `-1` from `LRUCache.get` for a missing key or from
  `CircularQueue.front` on an empty queue.

This is a library only; it provides no command-line tool.