"""Python versions of the topics covered by the exercises."""