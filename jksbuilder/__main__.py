from jksbuilder.app.shell import entry

entry()
