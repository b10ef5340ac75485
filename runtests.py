import sys
import os.path

rootDir = os.path.dirname(os.path.abspath(__file__))
srcDir = os.path.join(rootDir, "src")

sys.path = [srcDir] + sys.path

import buildpath.test

result = buildpath.test.run()

print("-------")
print("Summary: %i run, %i failed, %i errors" % (
  result.testsRun,
  len(result.failures),
  len(result.errors),
  ))

sys.exit(not result.wasSuccessful())
