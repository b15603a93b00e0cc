
def indent(text, indentation='. '):
  """
  Indent a block of text
  """
  return '\n'.join(indentation + line for line in text.split('\n'))

def find(predicate, it):
  """
  Find an item in an iterable that matches a predicate
  """
  for x in it:
    if predicate(x):
      return x

def last(predicate, seq):
  """
  Find the last item in a sequence that matches a predicate
  """
  return find(predicate, reversed(seq))

def bump(line_number):
  """
  Increment the final segment of a dotted line number
  bump('2.1.3') --> '2.1.4'
  """
  *init, tail = line_number.split('.')
  return '.'.join([*init, str(int(tail) + 1)])
