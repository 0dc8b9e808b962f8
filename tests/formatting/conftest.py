"""Test configuration and fixtures for formatting tests."""

import pytest


# A document mixing blocks, continuations, calls and comments
COMPLEX_SOURCE = '''
if someCondition then someLineExpression
if someCondition2 then a([
1,2,
3,
4,
])
if someThrirdCondition then
(
longExpressionThatReturnsAnArray +
anotherLongExpressionThatReturnsAnArray +
[
someLongExpression1,
someLongExpression +
someLongExpression2 -
someLongExpression3,
someOtherLongExpression,
]
)[0]()/
someLongDivisor
else if idkCondition
doStuff
doStuff2
end if

a = function(doStuffA)
while c
    doA
            doB
                        doC
for rice in a_bag
    cook(
            tea,
                            sugar,
red_pepper,
)
end for
                                        end while
                                
finishCooking();
end function

a = function()
    doStuffA
    a = {
    1:2,
    "2": veryLonCall() +
    anotherVeryLongCall(),
    }
    doStuffB(1,2,3)
    doStuffC((1+5),2,3)
    doStuffD 1, 2, 3
    doStuffE(1,2)3
    return a
end function

// A function nobody assigns is still a block
function
doStuff
end function
'''.strip()

COMPLEX_FORMATTED = '''
if someCondition then someLineExpression
if someCondition2 then a([
  1, 2,
  3,
  4,
])
if someThrirdCondition then
    (
      longExpressionThatReturnsAnArray +
        anotherLongExpressionThatReturnsAnArray +
        [
          someLongExpression1,
          someLongExpression +
            someLongExpression2 -
            someLongExpression3,
          someOtherLongExpression,
        ]
    )[0]() /
      someLongDivisor
else if idkCondition
    doStuff
    doStuff2
end if

a = function(doStuffA)
    while c
        doA
        doB
        doC
        for rice in a_bag
            cook(
              tea,
              sugar,
              red_pepper,
            )
        end for
    end while

    finishCooking
end function

a = function
    doStuffA
    a = {
      1: 2,
      "2": veryLonCall() +
        anotherVeryLongCall(),
    }
    doStuffB 1, 2, 3
    doStuffC (1 + 5), 2, 3
    doStuffD 1, 2, 3
    doStuffE(1, 2) 3
    return a
end function

// A function nobody assigns is still a block
function
    doStuff
end function
'''.strip()

NESTED_BLOCKS_SOURCE = '''if a then
while b
for x in c
f = function
body
end function
end for
end while
end if'''

NESTED_BLOCKS_FORMATTED = '''if a then
    while b
        for x in c
            f = function
                body
            end function
        end for
    end while
end if'''


@pytest.fixture
def complex_source():
    """Unformatted document covering most layout rules."""
    return COMPLEX_SOURCE


@pytest.fixture
def complex_formatted():
    """Expected layout of ``complex_source``."""
    return COMPLEX_FORMATTED


@pytest.fixture
def nested_blocks():
    """Nested block source and its expected layout."""
    return NESTED_BLOCKS_SOURCE, NESTED_BLOCKS_FORMATTED
